"""Unit tests for third-party script injection."""

import pytest

from folio.contexts.rendering.scripts import DEFERRED_TYPE, render_script_tags
from folio.contexts.site.config import ThirdPartyScript

SCRIPTS = (
    ThirdPartyScript(src="https://www.googletagmanager.com/gtag/js?id=G-1&l=x"),
    ThirdPartyScript(inline="gtag('config', 'G-1');"),
)


@pytest.mark.unit
def test_deferred_scripts_go_to_body_end_inert():
    tags = render_script_tags(SCRIPTS, deferred=True)

    assert str(tags.head) == ""
    body = str(tags.body_end)
    assert f'<script type="{DEFERRED_TYPE}" data-src="https://www.googletagmanager.com/gtag/js?id=G-1&amp;l=x">' in body
    assert f"<script type=\"{DEFERRED_TYPE}\">gtag('config', 'G-1');</script>" in body
    # Loader activates them after window load
    assert 'addEventListener("load"' in body


@pytest.mark.unit
def test_eager_scripts_go_to_head():
    tags = render_script_tags(SCRIPTS, deferred=False)

    assert str(tags.body_end) == ""
    head = str(tags.head)
    assert head.index("gtag/js") < head.index("gtag('config'")
    assert DEFERRED_TYPE not in head


@pytest.mark.unit
def test_no_scripts_renders_nothing():
    tags = render_script_tags((), deferred=True)
    assert not tags.head
    assert not tags.body_end


@pytest.mark.unit
def test_inline_script_cannot_close_tag_early():
    tags = render_script_tags((ThirdPartyScript(inline="var s = '</script>';"),), deferred=False)
    assert "'<\\/script>'" in str(tags.head)
