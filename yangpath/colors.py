# Copyright © 2020–2026 Yangpath contributors
#
# This file is part of Yangpath.
#
# Yangpath is free software: you can redistribute it and/or modify it under the
# terms of the GNU Lesser General Public License as published by the Free
# Software Foundation, either version 3 of the License, or (at your option) any
# later version.
#
# Yangpath is distributed in the hope that it will be useful, but WITHOUT ANY
# WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR
# A PARTICULAR PURPOSE.  See the GNU Lesser General Public License for more
# details.
#
# You should have received a copy of the GNU Lesser General Public License along
# with Yangpath.  If not, see <http://www.gnu.org/licenses/>.

"""Terminal decoration of path segments and types."""

from termcolor import colored


class Colorizer:
    """Optional bold and faint decoration of text.

    Colors are forced when enabled, regardless of whether the output
    is a terminal.
    """

    def __init__(self: "Colorizer", enabled: bool = True) -> None:
        self.enabled = enabled

    def bold(self: "Colorizer", text: str) -> str:
        """Return `text` in bold, used for list keys."""
        return self._decorate(text, "bold")

    def faint(self: "Colorizer", text: str) -> str:
        """Return faint `text`, used for leaf types."""
        return self._decorate(text, "dark")

    def _decorate(self: "Colorizer", text: str, attr: str) -> str:
        if not self.enabled:
            return text
        return colored(text, attrs=[attr], force_color=True)
