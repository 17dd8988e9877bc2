"""Logo spinner: strokes draw in one group at a time, the logo turns, strokes retract.

Run with ``python examples/logo_spinner.py > spinner.css``.
"""

from anime_css import anime

T = 450


def line(name: str) -> str:
    return ".spinner ." + name


def lines(names: list[str]) -> list[str]:
    return [line(name) for name in names]


timeline = anime.timeline(
    "spinner",
    {
        "loop": True,
        "autoplay": True,
        "duration": T,
        "easing": "ease-in-out",
    },
)


def keyframe(delay: float, params: dict) -> None:
    timeline.add(params, delay * T)


keyframe(0, {
    "targets": lines(["N-left", "E1-bottom", "E1-right", "W-bottom"]),
    "strokeDashoffset": 0,
})
keyframe(1, {
    "targets": lines(["E1-middle", "E2-middle", "W-middle"]),
    "strokeDashoffset": 0,
})
keyframe(2, {
    "targets": lines(["E1-top", "E2-bottom", "W-right", "N-right", "E1-left", "E2-left"]),
    "strokeDashoffset": 0,
})
keyframe(3, {
    "targets": ".spinner",
    "rotate": "1turn",
    "duration": 1.5 * T,
})
keyframe(3, {
    "targets": lines(["E1-top", "E2-bottom", "W-right", "N-right", "E1-left", "E2-left"]),
    "strokeDashoffset": 1010,
})
keyframe(4, {
    "targets": lines(["E1-middle", "E2-middle", "W-middle"]),
    "strokeDashoffset": 1010,
})
keyframe(4.5, {
    "targets": lines(["N-left", "E1-bottom", "E1-right", "W-bottom"]),
    "strokeDashoffset": 1010,
})


if __name__ == "__main__":
    print(timeline.into_css())
