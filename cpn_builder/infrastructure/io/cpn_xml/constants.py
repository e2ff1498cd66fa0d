"""Constants for CPN XML output.

Root tag, DOCTYPE identifiers and the fixed ``cpnet`` placeholders the tool
expects in every file.
"""

from cpn_builder.constants import Doctype

ROOT_TAG = Doctype.ROOT
DOCTYPE_PUBLIC_ID = Doctype.PUBLIC_ID

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
DOCTYPE_TEMPLATE = '<!DOCTYPE {root} PUBLIC "{public_id}" "{system_id}">'

MONITOR_BLOCK_NAME = "Monitors"

# Empty sections that close every cpnet, in document order.
CPNET_TRAILER = ("options", "binders")
