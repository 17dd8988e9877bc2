"""Tests for compiling timelines into CSS."""

import pytest

from anime_css import UnsupportedFeatureError, ValidationError, timeline
from anime_css.compiler import iteration_count
from anime_css.easing import css_timing_function_of
from anime_css.naming import animation_name


def _two_selector_timeline(**defaults):
    params = {"duration": 100, "easing": "linear", "loop": True, "autoplay": True}
    params.update(defaults)
    tl = timeline("test", params)
    tl.add({"targets": "h1", "opacity": 0}, 0)
    tl.add({"targets": ["h1", "h2"], "color": "red"})
    return tl


def test_into_css_output():
    output = _two_selector_timeline().into_css()

    assert output == (
        "/** h1 **/\n"
        "@keyframes test-h1 {\n"
        "  50% {\n"
        "    /* at 100 - 0 ms */\n"
        "    filter: opacity(0);\n"
        "  }\n"
        "\n"
        "  100% {\n"
        "    color: red;\n"
        "  }\n"
        "}\n"
        "\n"
        "h1 {\n"
        "  animation: test-h1 200ms;\n"
        "  animation-timing-function: linear;\n"
        "  animation-iteration-count: infinite;\n"
        "  animation-play-state: running;\n"
        "  animation-delay: 0ms;\n"
        "}\n"
        "\n"
        "\n"
        "/** h2 **/\n"
        "@keyframes test-h2 {\n"
        "  100% {\n"
        "    color: red;\n"
        "  }\n"
        "}\n"
        "\n"
        "h2 {\n"
        "  animation: test-h2 200ms;\n"
        "  animation-timing-function: linear;\n"
        "  animation-iteration-count: infinite;\n"
        "  animation-play-state: running;\n"
        "  animation-delay: 100ms;\n"
        "}\n"
        "\n"
        "\n"
    )


def test_compiling_twice_is_byte_identical():
    tl = _two_selector_timeline()

    assert tl.into_css() == tl.into_css()


def test_empty_timeline_compiles_to_nothing():
    assert timeline("empty", {"duration": 100}).into_css() == ""


def test_selectors_are_compiled_in_first_seen_order():
    tl = timeline("order", {"duration": 100})
    tl.add({"targets": ".b", "color": "red"})
    tl.add({"targets": [".a", ".b"], "color": "blue"})

    output = tl.into_css()

    assert output.index("/** .b **/") < output.index("/** .a **/")


def test_loop_false_elides_iteration_count_and_autoplay_false_pauses():
    output = _two_selector_timeline(loop=False, autoplay=False).into_css()

    assert "animation-iteration-count" not in output
    assert "animation-play-state: paused;" in output


def test_loop_count_and_direction():
    output = _two_selector_timeline(loop=3, direction="alternate").into_css()

    assert "animation-iteration-count: 3;" in output
    assert "animation-direction: alternate;" in output


def test_missing_easing_is_elided():
    tl = timeline("plain", {"duration": 100})
    tl.add({"targets": "h1", "color": "red"})

    assert "animation-timing-function" not in tl.into_css()


def test_shorthand_properties_in_keyframes():
    tl = timeline("spin", {"duration": 100})
    tl.add({"targets": ".logo", "rotate": "1turn", "translateX": "45px", "strokeDashoffset": 0})

    output = tl.into_css()

    assert "transform: rotate(1turn) translateX(45px);" in output
    assert "stroke-dashoffset: 0;" in output
    assert "rotate:" not in output
    assert "translateX:" not in output


def test_non_string_target_aborts_without_output():
    tl = timeline("test", {"duration": 100})
    tl.add({"targets": "h1", "color": "red"})
    tl.add({"targets": object(), "color": "blue"})

    with pytest.raises(ValidationError):
        tl.into_css()


class TestTimingFunctions:
    """anime.js easing names map to CSS timing functions where one exists."""

    def test_css_keywords_pass_through(self) -> None:
        assert css_timing_function_of("ease-in-out") == "ease-in-out"
        assert css_timing_function_of("steps(4)") == "steps(4)"

    def test_cubic_bezier_is_renamed(self) -> None:
        assert css_timing_function_of("cubicBezier(0.1, 0.7, 1.0, 0.1)") == (
            "cubic-bezier(0.1, 0.7, 1.0, 0.1)"
        )

    @pytest.mark.parametrize("easing", ["easeInOutSine", "easeOutElastic(1, .5)", "spring(1, 80, 10, 0)"])
    def test_runtime_easings_are_unsupported(self, easing: str) -> None:
        with pytest.raises(UnsupportedFeatureError):
            css_timing_function_of(easing)

    def test_function_easing_is_rejected(self) -> None:
        with pytest.raises(ValidationError, match="easing"):
            css_timing_function_of(lambda t: t)

    def test_penner_timeline_easing_fails_compilation(self) -> None:
        tl = _two_selector_timeline(easing="easeInQuad")
        with pytest.raises(UnsupportedFeatureError):
            tl.into_css()


def test_iteration_count():
    assert iteration_count(True) == "infinite"
    assert iteration_count(False) is None
    assert iteration_count(2) == 2
    with pytest.raises(ValidationError):
        iteration_count(0)


def test_animation_name_is_stable_and_identifier_safe():
    tl = timeline("spinner", {})

    assert animation_name(tl, ".spinner .N-left") == "spinner-spinner-N-left"
    assert animation_name(tl, "h1") == "spinner-h1"
    assert animation_name(tl, "h1.title") == animation_name(tl, "h1.title")
    assert "." not in animation_name(tl, "a.b.c")


def test_logo_spinner_timeline():
    T = 450
    tl = timeline("spinner", {"loop": True, "autoplay": True, "duration": T, "easing": "ease-in-out"})
    tl.add({"targets": [".spinner .N-left", ".spinner .W-bottom"], "strokeDashoffset": 0}, 0)
    tl.add({"targets": ".spinner", "rotate": "1turn", "duration": 1.5 * T}, 3 * T)
    tl.add({"targets": [".spinner .N-left", ".spinner .W-bottom"], "strokeDashoffset": 1010}, 4.5 * T)

    output = tl.into_css()

    assert output.count("@keyframes") == 3
    assert "@keyframes spinner-spinner {" in output
    assert "animation: spinner-spinner-N-left 2475ms;" in output
    assert "animation-delay: 1350ms;" in output
    assert "transform: rotate(1turn);" in output
    assert "duration: 675;" in output
    assert output.endswith("}\n\n\n")
