"""
Demo: Convert a small stylesheet and print the before/after declarations.
"""

import copy

from riconv import create
from riconv.model import Declaration, Ruleset, Stylesheet
from riconv.nodes import Call, RawText, ValueList, dimension
from riconv.render import render_declaration
from riconv.serialization import stylesheet_to_yaml


def build_example_stylesheet() -> Stylesheet:
    card = Ruleset(
        ".card",
        [
            Declaration("padding", ValueList((dimension(24, "px"), dimension(48, "px")))),
            Declaration("border", RawText("1px solid #ccc")),
            Declaration("box-shadow", RawText("0 2apx 10px rgba(0,0,0,.2)")),
            Declaration("background-position", RawText("10px 20px, 5px 5px")),
            Declaration("transform", Call("translate", (dimension(12, "px"), dimension(-36, "px")))),
            Declaration("line-height", dimension(1.5)),
        ],
        [Ruleset(".card .title", [Declaration("font-size", RawText("36px !important"))])],
    )
    return Stylesheet(name="Example Sheet", rulesets=[card])


def main():
    sheet = build_example_stylesheet()
    before = copy.deepcopy(sheet)

    engine = create(base_size=24, min_size=16)
    engine.run(sheet)

    print()
    print("=" * 70)
    print(f"RESOLUTION-INDEPENDENCE CONVERSION: {sheet.name}")
    print(f"  base_size={engine.options.base_size}  min_size={engine.options.min_size}  "
          f"min_unit_size={engine.options.min_unit_size}  precision={engine.options.precision}")
    print("=" * 70)
    print()

    for old, new in zip(before.iter_declarations(), sheet.iter_declarations()):
        print(f"  {render_declaration(old):<50} -> {render_declaration(new)}")

    print()
    print("YAML:")
    print(stylesheet_to_yaml(sheet))


if __name__ == "__main__":
    main()
