# This file implements a simple symbolic expression serialization format,
# used to dump tokens, mini ASTs and TAC ASTs.

import dataclasses
from enum import Enum


def _quote(s: str) -> str:
    escaped = s.replace('\\', '\\\\').replace('"', '\\"').replace('\n', '\\n')
    return f'"{escaped}"'


def to_exprs(obj):
    """Recursively convert the object into lists.
    The first item in each list is the type of the object.
    The object's items or field/value pairs then follow.
    Example:
        to_exprs(BinaryOp("+", Identifier("x"), Literal("2")))
        -> ['BinaryOp', 'operator', '"+"', 'left', ['Identifier', 'name', '"x"'],
            'right', ['Literal', 'value', '"2"']]
    """
    if isinstance(obj, Enum):
        return obj.name
    elif isinstance(obj, (type(None), bool, int, float)):
        return obj
    elif isinstance(obj, str):
        return _quote(obj)
    elif isinstance(obj, (tuple, list)):
        return [obj.__class__.__name__] + [to_exprs(x) for x in obj]
    elif dataclasses.is_dataclass(obj):
        exprs = [obj.__class__.__name__]
        for f in dataclasses.fields(obj):
            v = getattr(obj, f.name)
            if v is None:
                # suppress empty fields
                continue
            exprs.append(f.name)
            exprs.append(to_exprs(v))
        return exprs
    else:
        raise Exception(f"Don't know how to serialize {obj}")


def exprs_to_str(exprs) -> str:
    "Format the expressions as a string (compact)."
    if not isinstance(exprs, list):
        return f"{exprs}"
    return "(%s)" % " ".join(exprs_to_str(subexpr) for subexpr in exprs)


def exprs_to_str_pretty(exprs, indent: int, _level: int = 0) -> str:
    "Format the expressions as a string (pretty-printed)."
    if not isinstance(exprs, list):
        return f"{exprs}"
    lead = (" " * indent) * _level
    lead2 = (" " * indent) * (_level+1)
    text = "(" + exprs[0]
    if exprs[0] in ['tuple', 'list']:
        items = exprs[1:]
        if len(items) == 0:
            return text + ")"
        for subexpr in items:
            text += "\n" + lead2 + exprs_to_str_pretty(subexpr, indent, _level+1)
        return text + "\n" + lead + ")"
    it = iter(exprs[1:])
    pairs = list(zip(it, it))
    if all(not isinstance(v, list) for _, v in pairs):
        # leaf nodes fit on one line, e.g. (Var name "t0")
        for k, v in pairs:
            text += f" {k} {v}"
        return text + ")"
    for k, v in pairs:
        text += "\n" + lead2 + f"{k} " + exprs_to_str_pretty(v, indent, _level+1)
    return text + "\n" + lead + ")"


def to_exprs_str(obj, pretty=True, indent=4) -> str:
    "Serialize the object as symbolic expressions."
    exprs = to_exprs(obj)
    if pretty:
        return exprs_to_str_pretty(exprs, indent)
    else:
        return exprs_to_str(exprs)
