"""
Call-site helper

The dispatcher never inspects stack frames. Callers who want the
class/method/line of a log call pass it explicitly:

    logger.warn("low disk", source_location=here())
"""

import inspect


def here(depth: int = 1) -> str:
    """
    Describe the calling code location.

    Args:
        depth: How many frames above the caller of here() to describe
               (1 = the function that called here())

    Returns:
        "<qualified function name>:<line>", or "<unknown>" when the
        interpreter does not expose frames
    """
    frame = inspect.currentframe()
    try:
        for _ in range(depth):
            if frame is None:
                break
            frame = frame.f_back
        if frame is None:
            return "<unknown>"
        code = frame.f_code
        name = getattr(code, "co_qualname", code.co_name)
        return f"{name}:{frame.f_lineno}"
    finally:
        del frame
