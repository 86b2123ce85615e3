from enum import Enum


class SpecificationOperator(str, Enum):
    """Operators that appear in a specification AST."""

    # Leaf comparisons produced by the fragment builders
    EQ = "="
    GE = ">="
    LE = "<="
    BETWEEN = "between"
    IEQ = "ieq"
    ICONTAINS = "icontains"

    # Composites
    AND = "and"
    OR = "or"
    NOT = "not"
