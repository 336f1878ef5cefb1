"""
Compact JSON formatter that keeps flat arrays on single lines.
"""

import json


def dumps(obj, indent=2):
    """
    Serialize obj to a JSON formatted string.

    Arrays containing only numbers, strings or nulls are kept on a single
    line, so tile edges and grid rows stay readable. Nested structures are
    indented normally.

    Args:
        obj: The object to serialize
        indent: Number of spaces for indentation (default: 2)

    Returns:
        A formatted JSON string
    """
    def is_primitive(v):
        return v is None or isinstance(v, (bool, int, float, str))

    def is_flat_array(v):
        return isinstance(v, (list, tuple)) and all(
            x is None or (isinstance(x, (int, float, str)) and not isinstance(x, bool)) for x in v
        )

    def format_value(v, level):
        pad = " " * (indent * level)
        child_pad = " " * (indent * (level + 1))

        if is_primitive(v):
            return json.dumps(v)

        elif is_flat_array(v):
            return json.dumps(list(v))

        elif isinstance(v, (list, tuple)):
            if not v:
                return "[]"
            items = [format_value(x, level + 1) for x in v]
            inner = ",\n".join(child_pad + item for item in items)
            return "[\n" + inner + "\n" + pad + "]"

        elif isinstance(v, dict):
            if not v:
                return "{}"
            items = [f"{json.dumps(k)}: {format_value(val, level + 1)}" for k, val in v.items()]
            inner = ",\n".join(child_pad + item for item in items)
            return "{\n" + inner + "\n" + pad + "}"

        else:
            return json.dumps(v)

    return format_value(obj, 0)


def dump(obj, fp, indent=2):
    """Serialize obj to a JSON formatted stream."""
    fp.write(dumps(obj, indent))
    fp.write("\n")


def load(fp):
    return json.load(fp)
