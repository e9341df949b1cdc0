"""
Third-party script injection.

With the deferred_scripts integration enabled, third-party scripts (analytics,
widgets) are kept off the critical rendering path: they are emitted inert as
<script type="text/folio-deferred"> and a small loader activates them after the
window load event, in document order. Without it they are emitted as ordinary
scripts in <head>.
"""

from dataclasses import dataclass
from typing import Iterable

from markupsafe import Markup, escape

from folio.contexts.site.config import ThirdPartyScript

DEFERRED_TYPE = "text/folio-deferred"

DEFERRED_LOADER = f"""<script>
window.addEventListener("load", function () {{
  document.querySelectorAll('script[type="{DEFERRED_TYPE}"]').forEach(function (inert) {{
    var script = document.createElement("script");
    if (inert.dataset.src) {{ script.src = inert.dataset.src; script.async = false; }}
    else {{ script.text = inert.text; }}
    inert.parentNode.replaceChild(script, inert);
  }});
}});
</script>"""


@dataclass(frozen=True)
class ScriptTags:
    """Markup for the two injection points of the base template."""

    head: Markup = Markup("")
    body_end: Markup = Markup("")


def _safe_inline(code: str) -> str:
    # A literal "</script" would end the tag early
    return code.replace("</script", "<\\/script")


def render_script_tags(scripts: Iterable[ThirdPartyScript], deferred: bool) -> ScriptTags:
    """
    Render third-party scripts for the base template.

    Args:
        scripts: Configured third-party scripts
        deferred: Whether the deferred_scripts integration is enabled

    Returns:
        ScriptTags with markup for <head> and for the end of <body>
    """
    scripts = tuple(scripts)
    if not scripts:
        return ScriptTags()

    tags = []
    for script in scripts:
        if deferred:
            if script.src:
                tags.append(f'<script type="{DEFERRED_TYPE}" data-src="{escape(script.src)}"></script>')
            else:
                tags.append(f'<script type="{DEFERRED_TYPE}">{_safe_inline(script.inline)}</script>')
        else:
            if script.src:
                tags.append(f'<script src="{escape(script.src)}"></script>')
            else:
                tags.append(f"<script>{_safe_inline(script.inline)}</script>")

    markup = Markup("\n".join(tags))
    if deferred:
        return ScriptTags(body_end=markup + Markup("\n") + Markup(DEFERRED_LOADER))
    return ScriptTags(head=markup)
