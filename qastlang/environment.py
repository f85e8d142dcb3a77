"""Variable environment.

The environment is a stack of frames. Frame 0 is the global frame and is
never removed. Assignment always writes to the innermost frame, so a
binding in an inner frame shadows an outer one instead of replacing it.
Lookup walks from the innermost frame outwards and the first hit wins.


File: environment.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import Any, Dict, List, Optional

from qastlang.exceptions import InternalError, UndefinedVariableError
from qastlang.nodes import Location


class Environment:
    """Stack of name -> value frames."""

    def __init__(self, globals_: Optional[Dict[str, Any]] = None):
        self.frames: List[Dict[str, Any]] = [dict(globals_ or {})]

    @property
    def globals(self) -> Dict[str, Any]:
        return self.frames[0]

    @property
    def depth(self) -> int:
        return len(self.frames)

    def push_frame(self) -> None:
        self.frames.append({})

    def pop_frame(self) -> Dict[str, Any]:
        if len(self.frames) == 1:
            raise InternalError("Cannot pop the global frame")
        return self.frames.pop()

    def set(self, name: str, value: Any) -> None:
        """
        Create or overwrite ``name`` in the innermost frame.
        """
        self.frames[-1][name] = value

    def get(self, name: str, loc: Optional[Location] = None, file: Optional[str] = None) -> Any:
        """
        Look ``name`` up from the innermost frame outwards.

        Raises:
            UndefinedVariableError: If no frame binds ``name``; positioned
                at ``loc`` when given.
        """
        for frame in reversed(self.frames):
            if name in frame:
                return frame[name]
        line = loc.start.line if loc is not None else None
        column = loc.start.column if loc is not None else None
        raise UndefinedVariableError(name, file, line, column)

    def __contains__(self, name: str) -> bool:
        return any(name in frame for frame in self.frames)
