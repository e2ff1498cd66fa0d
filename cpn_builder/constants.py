from typing import ClassVar


class Defaults:
    SPACING_X = 126
    SPACING_Y = 126
    ID_PREFIX = "ID"
    ID_SEED = 10
    INDENT = 2
    DEFAULT_INSCRIPTION = "1`()"
    CONFIG_FILE = "cpn_builder.toml"


class Generator:
    TOOL = "CPN Tools"
    VERSION = "4.0.1"
    FORMAT = "6"


class Doctype:
    ROOT = "workspaceElements"
    PUBLIC_ID = "-//CPN//DTD CPNXML 1.0//EN"
    SYSTEM_ID = "http://cpntools.org/DTD/6/cpn.dtd"


class Offsets:
    TYPE_LABEL = (50, -25)
    INITMARK_LABEL = (50, 25)
    FUSION_TAG = (0, -20)
    PORT_TAG = (-25, -20)
    CONDITION_LABEL = (0, 25)
    SUBPAGE_INFO = (0, -25)


class Shapes:
    PLACE_WIDTH = "60.000000"
    PLACE_HEIGHT = "40.000000"
    TRANSITION_WIDTH = "60.000000"
    TRANSITION_HEIGHT = "40.000000"
    TOKEN_OFFSET: ClassVar[tuple[str, str]] = ("-10.000000", "0.000000")
    MARKING_OFFSET: ClassVar[tuple[str, str]] = ("0.000000", "0.000000")
    ARROW_HEADSIZE = "1.200000"
    ARROW_CURRENTCYCKLE = "2"
