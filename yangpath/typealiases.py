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

"""Type aliases for use with type hints [PEP484]_."""

YangIdentifier = str
"""YANG identifier, see sec. `6.2`_ of [RFC7950]_."""

ModuleName = YangIdentifier
"""Name of a YANG module."""

XPath = str
"""Path in XPath style, e.g. ``/interfaces/interface[name=*]/mtu``."""

RestconfPath = str
"""Path in RESTCONF style, e.g. ``/interfaces/interface=name/mtu``."""

TemplateVar = str
"""Template variable argument in the form ``KEY:::VALUE``."""

TemplateVars = dict[str, str]
"""Dictionary of template variables passed to the template context."""
