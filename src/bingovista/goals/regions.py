"""
Region goals: entering, avoiding and visiting places in the world.
"""

import re
from typing import List, Optional, TYPE_CHECKING

from ..binary import apply_uint, clamp
from ..constants import CHAR_MAX, GOAL_LENGTH
from ..models import GoalParams, PaintPrimitive
from .paint import BREAK, icon, progress, text
from .schema import DONE_FIELDS, BinaryField, GoalDefinition, TextField

if TYPE_CHECKING:
    from ..game_data import GameDataService


# =============================================================================
# Entering and avoiding regions
# =============================================================================

def _remaining(p: GoalParams) -> int:
    return int(p["amount"]) - int(p["current"])


def _all_regions_binary(
    p: GoalParams, data: "GameDataService", type_number: int
) -> Optional[bytes]:
    # Progress is not stored; only the count still to enter
    enums = data.enums
    payload = bytearray(2)
    apply_uint(payload, 0, 1, enums.index_of("regionsreal", p["region"]))
    apply_uint(payload, 1, 1, clamp(_remaining(p), CHAR_MAX))
    payload.extend(enums.indices_of("regionsreal", p["remaining"]))
    payload = payload[:255]
    return bytes([type_number, 0, len(payload)]) + bytes(payload)


ALL_REGIONS_EXCEPT = GoalDefinition(
    name="BingoAllRegionsExcept",
    params={"region": "SU", "remaining": [], "current": 0, "amount": 1},
    binary=(
        BinaryField.number("region", 0, enum="regionsreal"),
        BinaryField.number("amount", 1),
        BinaryField.string("remaining", 2, enum="regionsreal"),
    ),
    text=(
        TextField.choice("region", "Region", 0, "regionsreal"),
        TextField.items("remaining"),
        TextField.number("current"),
        TextField.integer("amount", "Amount", 1),
    )
    + DONE_FIELDS,
    category="Entering regions while never visiting one",
    describe=lambda p, data: (
        f"Enter {_remaining(p)} regions that are not "
        f"{data.region_name(str(p['region']))}."
    ),
    comment=lambda p, data: (
        "This challenge is potentially quite customizable; only regions in the "
        "list need to be entered. Normally, the list is populated with all campaign "
        "story regions (i.e. corresponding Wanderer pips), so that progress can be "
        "checked on the sheltering screen. All that matters towards completion, is "
        "Progress equaling Total; thus we can set a lower bar and play a \"The "
        "Wanderer\"-lite; or we could set a specific collection of regions to "
        "enter, to entice players towards them. Downside: the latter functionality "
        "is not currently supported in-game: the region list is something of a "
        "mystery unless viewed and manually tracked. (This goal generates with all "
        "regions listed, so that all will contribute towards the goal.)"
    ),
    paint=lambda p, data: [
        icon("TravellerA"),
        icon("buttonCrossA", data.color("Unity_red")),
        text(str(p["region"])),
        BREAK,
        progress(p["amount"], p["current"]),
    ],
    labels=(
        ("Region", "region"),
        ("To do", "remaining"),
        ("Progress", "current"),
        ("Total", "amount"),
    ),
    encode_binary=_all_regions_binary,
)

ENTER_REGION = GoalDefinition(
    name="BingoEnterRegionChallenge",
    params={"region": "SU"},
    binary=(BinaryField.number("region", 0, enum="regionsreal"),),
    text=(TextField.choice("region", "Region", 0, "regionsreal"),) + DONE_FIELDS,
    category="Entering a region",
    describe=lambda p, data: f"Enter {data.region_name(str(p['region']))}.",
    paint=lambda p, data: [
        icon("keyShiftA", data.color("Unity_green"), rotation=90),
        text(str(p["region"])),
    ],
)

ENTER_REGION_FROM = GoalDefinition(
    name="BingoEnterRegionFromChallenge",
    params={"from": "SU", "to": "HI"},
    binary=(
        BinaryField.number("from", 0, enum="regionsreal"),
        BinaryField.number("to", 1, enum="regionsreal"),
    ),
    text=(
        TextField.choice("from", "From", 0, "regionsreal"),
        TextField.choice("to", "To", 0, "regionsreal"),
    )
    + DONE_FIELDS,
    category="Entering a region from another region",
    describe=lambda p, data: (
        f"First time entering {data.region_name(str(p['to']))} "
        f"must be from {data.region_name(str(p['from']))}."
    ),
    paint=lambda p, data: [
        text(str(p["from"])),
        BREAK,
        icon("keyShiftA", data.color("EnterFrom"), rotation=180),
        BREAK,
        text(str(p["to"])),
    ],
)

NO_REGION = GoalDefinition(
    name="BingoNoRegionChallenge",
    params={"region": "SU"},
    binary=(BinaryField.number("region", 0, enum="regionsreal"),),
    text=(TextField.choice("region", "Region", 0, "regionsreal"),) + DONE_FIELDS,
    category="Avoiding a region",
    describe=lambda p, data: f"Do not enter {data.region_name(str(p['region']))}.",
    paint=lambda p, data: [
        icon("buttonCrossA", data.color("Unity_red")),
        text(str(p["region"])),
    ],
)


# =============================================================================
# Echoes, tolls and broadcasts
# =============================================================================

def _echo_paint(p: GoalParams, data: "GameDataService") -> List[PaintPrimitive]:
    paint: List[PaintPrimitive] = [icon("echo_icon"), text(str(p["echo"]))]
    if p["starving"]:
        paint.extend([BREAK, icon("Multiplayer_Death")])
    return paint


ECHO = GoalDefinition(
    name="BingoEchoChallenge",
    params={"echo": "CC", "starving": False},
    binary=(
        BinaryField.number("echo", 0, enum="echoes"),
        BinaryField.flag("starving", 4),
    ),
    text=(
        TextField.choice("echo", "Region", 0, "echoes"),
        TextField.boolean("starving", "While Starving", 1),
    )
    + DONE_FIELDS,
    category="Visiting echoes",
    describe=lambda p, data: (
        f"Visit the {data.region_name(str(p['echo']))} Echo"
        + (", while starving." if p["starving"] else ".")
    ),
    paint=_echo_paint,
)

# Outposts sharing a region are told apart by their position
TOLL_SUFFIXES = {"gw_c11": " underground", "gw_c05": " surface"}


def _toll_desc(p: GoalParams, data: "GameDataService") -> str:
    toll = str(p["toll"])
    region = data.region_name(data.region_of_room(toll).upper())
    return (
        f"Throw a grenade at the {region}{TOLL_SUFFIXES.get(toll, '')} "
        "Scavenger toll"
        + (", then pass it." if p["pass"] else ".")
    )


def _toll_paint(p: GoalParams, data: "GameDataService") -> List[PaintPrimitive]:
    paint: List[PaintPrimitive] = [
        icon("Symbol_StunBomb", data.entity_color("ScavengerBomb")),
        icon("scavtoll"),
    ]
    if p["pass"]:
        paint.append(icon("singlearrow"))
    paint.extend([BREAK, text(str(p["toll"]).upper())])
    return paint


BOMB_TOLL = GoalDefinition(
    name="BingoBombTollChallenge",
    params={"toll": "su_c02", "pass": False},
    binary=(
        BinaryField.number("toll", 0, enum="tolls"),
        BinaryField.flag("pass", 4),
    ),
    text=(
        TextField.choice("toll", "Scavenger Toll", 1, "tolls"),
        TextField.boolean("pass", "Pass the Toll", 0),
    )
    + DONE_FIELDS,
    category="Throwing grenades at Scavenger tolls",
    describe=_toll_desc,
    comment=lambda p, data: (
        "Bomb and pass must be done in that order, in the same cycle."
    ),
    paint=_toll_paint,
)


def _broadcast_desc(p: GoalParams, data: "GameDataService") -> str:
    chatlog = str(p["broadcast"])
    code = chatlog[chatlog.find("_") + 1:]
    code = re.split(r"[0-9]", code, maxsplit=1)[0]
    region = data.table("region_names").get(code, "")
    return f"Get the {chatlog} chat log" + (f" in {region}" if region else "")


BROADCAST = GoalDefinition(
    name="BingoBroadcastChallenge",
    params={"broadcast": "Chatlog_CC0"},
    binary=(BinaryField.number("broadcast", 0, enum="chatlogs"),),
    text=(TextField.choice("broadcast", "Broadcast", 0, "chatlogs"),) + DONE_FIELDS,
    category="Getting Chat Logs",
    describe=_broadcast_desc,
    paint=lambda p, data: [
        icon("Symbol_Satellite", data.color("WhiteColor")),
        BREAK,
        text(str(p["broadcast"])),
    ],
)


# =============================================================================
# Vistas: stock points are stored by index, custom ones verbatim
# =============================================================================

def _stock_index(p: GoalParams, data: "GameDataService") -> int:
    return data.stock_vista_index(
        str(p["region"]), str(p["room"]), int(p["x"]), int(p["y"])
    )


def _vista_comment(p: GoalParams, data: "GameDataService") -> str:
    kind = "stock" if _stock_index(p, data) else "customized"
    return (
        f"Room: {p['room']} at x: {p['x']}, y: {p['y']}; is a {kind} location.\n"
        "Note: the room names for certain Vista Points in Spearmaster/Artificer "
        "Garbage Wastes, and Rivulet Underhang, are not generated correctly for "
        "their world state, and so may not show correctly on the map; the analogous "
        "rooms are however fixed up in-game."
    )


def _vista_is_custom(p: GoalParams, data: "GameDataService") -> bool:
    return _stock_index(p, data) == 0


def _vista_stock_binary(
    p: GoalParams, data: "GameDataService", type_number: int
) -> Optional[bytes]:
    index = _stock_index(p, data)
    if not index or index > 255:
        return None
    return bytes([type_number, 0, GOAL_LENGTH - 2, index])


VISTA = GoalDefinition(
    name="BingoVistaChallenge",
    params={"region": "CC", "room": "CC_A10", "x": 734, "y": 506},
    binary=(
        BinaryField.number("region", 0, enum="regions"),
        BinaryField.string("room", 5),
        BinaryField.number("x", 1, size=2),
        BinaryField.number("y", 3, size=2),
    ),
    text=(
        TextField.text("region"),
        TextField.choice("room", "Room", 0, "vista"),
        TextField.number("x"),
        TextField.number("y"),
    )
    + DONE_FIELDS,
    category="Visiting Vistas",
    describe=lambda p, data: (
        f"Reach the vista point in {data.region_name(str(p['region']))}."
    ),
    comment=_vista_comment,
    paint=lambda p, data: [icon("vistaicon"), BREAK, text(str(p["region"]))],
    labels=(("Region", "region"), ("Room", "room"), ("X", "x"), ("Y", "y")),
    binary_accepts=_vista_is_custom,
)

VISTA_EX = VISTA.upgrade(
    "BingoVistaExChallenge",
    binary=(
        BinaryField.number("region", 0, enum="vista_region"),
        BinaryField.number("room", 0, enum="vista_room"),
        BinaryField.number("x", 0, enum="vista_x"),
        BinaryField.number("y", 0, enum="vista_y"),
    ),
    encode_binary=_vista_stock_binary,
)
