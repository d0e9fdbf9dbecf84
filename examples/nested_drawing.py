#!/usr/bin/env python3
"""Example: Build a nested drawing and transform it.

Run with: python examples/nested_drawing.py
"""

from modeltree import Arc, Circle, Line, Model, UnitType
from modeltree import mirror, move, originate, rotate, scale_units


def create_bracket() -> Model:
    """An L-shaped bracket with a mounting hole and a rounded corner."""
    return Model(
        type="bracket",
        units=UnitType.MILLIMETER,
        paths={
            "bottom": Line(origin=(0, 0), end=(40, 0)),
            "side": Line(origin=(0, 0), end=(0, 30)),
            "corner": Arc(origin=(40, 10), radius=10, start_angle=270, end_angle=360),
        },
        models={
            "hole": Model(origin=(20, 15), paths={"bore": Circle(origin=(0, 0), radius=3)}),
        },
    )


def main():
    print("modeltree - Nested Drawing Example")
    print("=" * 40)

    drawing = Model(units=UnitType.MILLIMETER, models={"left": create_bracket()})
    bracket = drawing.models["left"]

    print("\n1. Placing bracket at (100, 50)...")
    move(bracket, (100, 50))

    print("2. Adding a mirrored twin...")
    drawing.models["right"] = move(mirror(bracket, True, False), (-100, 50))

    print("3. Rotating the twin 90 degrees about its hole...")
    rotate(drawing.models["right"], 90, (-120, 65))

    print("4. Converting millimeters to centimeters...")
    scale_units(drawing, Model(units=UnitType.CENTIMETER))
    drawing.units = UnitType.CENTIMETER

    print("5. Flattening to absolute coordinates...")
    originate(drawing)

    for route, node in drawing.walk():
        for path_id, path in (node.paths or {}).items():
            print(f"   {'/'.join(route)}/{path_id}: {path.model_dump(exclude={'type'})}")


if __name__ == "__main__":
    main()
