######################### Regexes ##################################
# patterns are strings so that they can be combined into bigger ones

# https://docs.python.org/3/library/re.html#simulating-scanf
unsigned_re = r"(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?"
number_re = rf"[-+]?{unsigned_re}"
# a custom property or context name without the leading dashes
ident_re = r"[_a-zA-Z][-_a-zA-Z0-9]*"


def match_bracket(s: str, opening="(", closing=")") -> int | None:
    """
    The index of the bracket that closes an already opened one, None if there is none

    `match_bracket("a(b)c)d") == 5`
    """
    depth = 0
    for i, c in enumerate(s):
        if c == opening:
            depth += 1
        elif c == closing:
            if not depth:
                return i
            depth -= 1
    return None
