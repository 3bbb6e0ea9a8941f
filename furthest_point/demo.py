from . import PointKind, find_max

SAMPLES = [
    ("int", 2, "(1 2) (3 4) (0 0)"),
    ("int", 2, "(1 1) garbage line here\n(5 0)"),
    ("double", 3, "( 1.5 -2 0.25 )\n( -3e0 0 1 )\n"),
    ("int", 2, "(1 2 3)"),
    ("int", 2, ""),
]


def run():
    for scalar, size, text in SAMPLES:
        kind = PointKind.from_names(scalar, size)
        result = find_max(text, kind, name=f"<{scalar}[{size}] sample>")
        print(f"Source: {text!r}")
        if result.found:
            print(f"  maximum: {result.maximum} (norm {result.maximum.norm():.6g})")
        else:
            print(f"  no maximum ({result.status.value})")
        for event in result.events:
            print(f"  - {event}")
        print()


if __name__ == "__main__":
    run()
