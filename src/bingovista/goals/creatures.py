"""
Creature goals: killing, hitting, taming, pinning and moving creatures.
"""

from typing import List, TYPE_CHECKING

from ..models import GoalParams, PaintPrimitive
from .paint import BREAK, icon, progress, text
from .schema import DONE_FIELDS, BinaryField, GoalDefinition, TextField

if TYPE_CHECKING:
    from ..game_data import GameDataService

ANY_CREATURE = "Any Creature"
ANY_REGION = "Any Region"
ANY_SUBREGION = "Any Subregion"
ANY_WEAPON = "Any Weapon"


def _subregion(p: GoalParams) -> str:
    # Older generators escaped the apostrophe
    return str(p["subregion"]).replace("Journey\\'s End", "Journey's End")


def _creature_icon(name: str, data: "GameDataService") -> PaintPrimitive:
    return icon(data.creature_icon(name), data.entity_color(name))


# =============================================================================
# Killing
# =============================================================================

def _kill_desc(p: GoalParams, data: "GameDataService") -> str:
    crit = str(p["crit"])
    subject = data.quantify(
        int(p["amount"]), crit if crit != ANY_CREATURE else "creatures"
    )
    where = ""
    if p["region"] != ANY_REGION:
        where = f" in {data.region_name(str(p['region']))}"
    if p["subregion"] != ANY_SUBREGION:
        where = f" in {_subregion(p)}"
    if p["deathPit"]:
        weapon = ", with a death pit"
    elif p["weapon"] != ANY_WEAPON:
        weapon = f" with {data.entity_display_name(str(p['weapon']))}"
    else:
        weapon = ""
    return (
        f"Kill {subject}{where}{weapon}"
        + (", while starving" if p["starving"] else "")
        + (", in one cycle" if p["oneCycle"] else "")
        + "."
    )


def _kill_paint(p: GoalParams, data: "GameDataService") -> List[PaintPrimitive]:
    paint: List[PaintPrimitive] = []
    if p["deathPit"]:
        paint.append(icon("deathpiticon"))
    elif p["weapon"] != ANY_WEAPON:
        weapon = str(p["weapon"])
        paint.append(icon(data.item_icon(weapon), data.entity_color(weapon)))
    paint.append(icon("Multiplayer_Bones"))
    if p["crit"] != ANY_CREATURE:
        paint.append(_creature_icon(str(p["crit"]), data))
    paint.append(BREAK)
    if p["subregion"] != ANY_SUBREGION:
        paint.extend([text(_subregion(p)), BREAK])
    elif p["region"] != ANY_REGION:
        paint.extend([text(str(p["region"])), BREAK])
    paint.append(progress(p["amount"]))
    if p["starving"]:
        paint.append(icon("Multiplayer_Death"))
    if p["oneCycle"]:
        paint.append(icon("cycle_limit"))
    return paint


KILL = GoalDefinition(
    name="BingoKillChallenge",
    params={
        "crit": ANY_CREATURE,
        "weapon": ANY_WEAPON,
        "amount": 1,
        "region": ANY_REGION,
        "subregion": ANY_SUBREGION,
        "oneCycle": False,
        "deathPit": False,
        "starving": False,
    },
    binary=(
        BinaryField.number("crit", 0, enum="creatures"),
        BinaryField.number("weapon", 1, enum="weaponsnojelly"),
        BinaryField.number("amount", 2, size=2),
        BinaryField.number("region", 4, enum="regions"),
        BinaryField.number("subregion", 5, enum="subregions"),
        BinaryField.flag("oneCycle", 4),
        BinaryField.flag("deathPit", 5),
        BinaryField.flag("starving", 6),
    ),
    text=(
        TextField.choice("crit", "Creature Type", 0, "creatures"),
        TextField.choice("weapon", "Weapon Used", 6, "weaponsnojelly"),
        TextField.integer("amount", "Amount", 1),
        TextField.number(),
        TextField.choice("region", "Region", 5, "regions"),
        TextField.choice("subregion", "Subregion", 4, "subregions"),
        TextField.boolean("oneCycle", "In one Cycle", 3),
        TextField.boolean("deathPit", "Via a Death Pit", 7),
        TextField.boolean("starving", "While Starving", 2),
    )
    + DONE_FIELDS,
    category="Killing creatures",
    describe=_kill_desc,
    comment=lambda p, data: (
        "(If defined, subregion takes precedence over region. If set, Death Pit "
        "takes precedence over weapon selection.)\n"
        "Credit is determined by the last source of 'blame' at time of death. For "
        "creatures that take multiple hits, try to \"soften them up\" with more "
        "common items, before using limited ammunition to deliver the killing "
        "blow.  Creatures that \"bleed out\", can be mortally wounded (brought to "
        "or below 0 HP), before being tagged with a specific weapon to obtain "
        "credit. Conversely, weapons that do slow damage (like Spore Puff) can lose "
        "blame over time; consider carrying additional ammunition to deliver the "
        "killing blow. Starving: must be in the \"malnourished\" state; this state "
        "is cleared after eating to full.\n"
        "Note: the reskinned BLLs in the Past Garbage Wastes tunnel, count as both "
        "BLL and DLL for this challenge."
    ),
    paint=_kill_paint,
)


# =============================================================================
# Hitting: the root layout predates the one-cycle and region options
# =============================================================================

def _damage_desc(p: GoalParams, data: "GameDataService") -> str:
    amount = int(p["amount"])
    where = ""
    if p["region"] != ANY_REGION:
        where = f", in {data.region_name(str(p['region']))}"
    if p["subregion"] != ANY_SUBREGION:
        where = f", in {_subregion(p)}"
    return (
        f"Hit {data.entity_display_name(str(p['victim']))} "
        f"with {data.entity_display_name(str(p['weapon']))} "
        f"{amount} {'times' if amount > 1 else 'time'}"
        + where
        + (", in one cycle" if p["inOneCycle"] else "")
        + "."
    )


def _damage_paint(p: GoalParams, data: "GameDataService") -> List[PaintPrimitive]:
    paint: List[PaintPrimitive] = []
    if p["weapon"] != ANY_WEAPON:
        weapon = str(p["weapon"])
        paint.append(icon(data.item_icon(weapon), data.entity_color(weapon)))
    paint.append(icon("bingoimpact"))
    if p["victim"] != ANY_CREATURE:
        paint.append(_creature_icon(str(p["victim"]), data))
    if p["subregion"] != ANY_SUBREGION:
        paint.extend([BREAK, text(_subregion(p))])
    elif p["region"] != ANY_REGION:
        paint.extend([BREAK, text(str(p["region"]))])
    paint.extend([BREAK, progress(p["amount"])])
    if p["inOneCycle"]:
        paint.append(icon("cycle_limit"))
    return paint


def _damage_is_classic(p: GoalParams, data: "GameDataService") -> bool:
    return (
        not p["inOneCycle"]
        and p["region"] == ANY_REGION
        and p["subregion"] == ANY_SUBREGION
    )


def _damage_has_subregion(p: GoalParams, data: "GameDataService") -> bool:
    return p["subregion"] != ANY_SUBREGION


def _damage_without_subregion(p: GoalParams, data: "GameDataService") -> bool:
    return p["subregion"] == ANY_SUBREGION


_DAMAGE_BINARY = (
    BinaryField.number("weapon", 0, enum="weapons"),
    BinaryField.number("victim", 1, enum="creatures"),
    BinaryField.number("amount", 2, size=2),
)

_DAMAGE_TEXT_HEAD = (
    TextField.choice("weapon", "Weapon", 0, "weapons"),
    TextField.choice("victim", "Creature Type", 1, "creatures"),
    TextField.number("current"),
    TextField.integer("amount", "Amount", 2),
)

DAMAGE = GoalDefinition(
    name="BingoDamageChallenge",
    params={
        "weapon": ANY_WEAPON,
        "victim": ANY_CREATURE,
        "current": 0,
        "amount": 1,
        "inOneCycle": False,
        "region": ANY_REGION,
        "subregion": ANY_SUBREGION,
    },
    binary=_DAMAGE_BINARY,
    text=_DAMAGE_TEXT_HEAD + DONE_FIELDS,
    category="Hitting creatures with items",
    describe=_damage_desc,
    comment=lambda p, data: (
        "Note: subregion was never fully implemented, and is deprecated in v1.2+. "
        "Bingovista displays this parameter only for completeness."
    ),
    paint=_damage_paint,
    labels=(
        ("Weapon", "weapon"),
        ("Creature Type", "victim"),
        ("Amount", "amount"),
        ("In One Cycle", "inOneCycle"),
        ("Region", "region"),
        ("Subregion", "subregion"),
    ),
    binary_accepts=_damage_is_classic,
)

DAMAGE_EX = DAMAGE.upgrade(
    "BingoDamageExChallenge",
    binary=_DAMAGE_BINARY
    + (
        BinaryField.flag("inOneCycle", 4),
        BinaryField.number("region", 4, enum="regions"),
        BinaryField.number("subregion", 5, enum="subregions"),
    ),
    text=_DAMAGE_TEXT_HEAD
    + (
        TextField.boolean("inOneCycle", "In One Cycle", 3),
        TextField.choice("region", "Region", 4, "regions"),
        TextField.choice("subregion", "Subregion", 5, "subregions"),
    )
    + DONE_FIELDS,
    text_accepts=_damage_has_subregion,
)

DAMAGE_EX2 = DAMAGE.upgrade(
    "BingoDamageEx2Challenge",
    binary=_DAMAGE_BINARY
    + (
        BinaryField.flag("inOneCycle", 4),
        BinaryField.number("region", 4, enum="regions"),
    ),
    text=_DAMAGE_TEXT_HEAD
    + (
        TextField.boolean("inOneCycle", "In One Cycle", 3),
        TextField.choice("region", "Region", 4, "regions"),
    )
    + DONE_FIELDS,
    binary_accepts=_damage_without_subregion,
)


# =============================================================================
# Befriending
# =============================================================================

def _tame_desc(p: GoalParams, data: "GameDataService") -> str:
    if p["specific"]:
        return f"Befriend {data.quantify(1, str(p['crit']))}."
    return f"Befriend [0/{p['amount']}] unique creatures."


def _tame_paint(p: GoalParams, data: "GameDataService") -> List[PaintPrimitive]:
    paint: List[PaintPrimitive] = [icon("FriendB")]
    if p["specific"]:
        paint.append(_creature_icon(str(p["crit"]), data))
    else:
        paint.extend([BREAK, progress(p["amount"])])
    return paint


def _tame_is_specific(p: GoalParams, data: "GameDataService") -> bool:
    return bool(p["specific"])


TAME = GoalDefinition(
    name="BingoTameChallenge",
    params={
        "specific": True,
        "crit": "CicadaA",
        "current": 0,
        "amount": 1,
        "tamed": [],
    },
    binary=(BinaryField.number("crit", 0, enum="friend"),),
    text=(TextField.choice("crit", "Creature Type", 0, "friend"),) + DONE_FIELDS,
    category="Befriending creatures",
    describe=_tame_desc,
    comment=lambda p, data: (
        "Taming occurs when a creature has been fed or rescued enough times to "
        "increase the player's reputation above some threshold, starting from a "
        "default depending on species, and the global and regional reputation of "
        "the player.\n"
        "Feeding occurs when: 1. the player drops an edible item, creature or "
        "corpse, 2. within view of the creature, and 3. the creature bites that "
        "object. A \"happy lizard\" sound indicates success. The creature does not "
        "need to den with the item to increase reputation. Stealing the object back "
        "from the creature's jaws does not reduce reputation.\n"
        "A rescue occurs when: 1. a creature sees or is grabbed by a threat, 2. the "
        "player attacks the threat (if the creatures was grabbed, the predator must "
        "be stunned enough to drop the creature), and 3. the creature sees the "
        "attack (or gets dropped because of it).\n"
        "For the multiple-tame option, creature types count toward progress "
        "(multiple tames of a given type/color/species do not increase the count). "
        "Note that any befriendable creature type counts towards the total, "
        "including both Lizards and Squidcadas."
    ),
    paint=_tame_paint,
    labels=(
        ("Specific Creature Type", "specific"),
        ("Creature Type", "crit"),
        ("Amount", "amount"),
    ),
    text_accepts=_tame_is_specific,
    binary_accepts=_tame_is_specific,
)

TAME_EX = TAME.upgrade(
    "BingoTameExChallenge",
    binary=(
        BinaryField.flag("specific", 4),
        BinaryField.number("crit", 0, enum="friend"),
        BinaryField.number("amount", 1),
    ),
    text=(
        TextField.boolean("specific", "Specific Creature Type", 0),
        TextField.choice("crit", "Creature Type", 1, "friend"),
        TextField.number("current"),
        TextField.integer("amount", "Amount", 2),
    )
    + DONE_FIELDS
    + (TextField.items("tamed"),),
)


# =============================================================================
# Other creature goals
# =============================================================================

def _gate_desc(p: GoalParams, data: "GameDataService") -> str:
    amount = int(p["amount"])
    return (
        f"Transport {data.quantify(1, str(p['crit']))} through {amount} "
        f"gate{'s' if amount > 1 else ''}."
    )


CREATURE_GATE = GoalDefinition(
    name="BingoCreatureGateChallenge",
    params={"crit": "JetFish", "amount": 1},
    binary=(
        BinaryField.number("crit", 0, enum="transport"),
        BinaryField.number("amount", 1),
    ),
    text=(
        TextField.choice("crit", "Creature Type", 1, "transport"),
        TextField.number(),
        TextField.integer("amount", "Amount", 0),
        TextField.blank("empty"),
    )
    + DONE_FIELDS,
    category="Transporting the same creature through gates",
    describe=_gate_desc,
    comment=lambda p, data: (
        "When a creature is taken through a gate, that gate room is added to a "
        "list. If a gate already appears in the list, taking that gate again will "
        "not advance the count. Thus, you can't grind progress by taking one gate "
        "back and forth. The list is stored per creature transported; thus, taking "
        "a new different creature does not advance the count, nor does piling "
        "creatures into one gate. When the gate count of any logged creature "
        "reaches the goal, credit is awarded."
    ),
    paint=lambda p, data: [
        _creature_icon(str(p["crit"]), data),
        icon("singlearrow"),
        icon("ShortcutGate"),
        BREAK,
        progress(p["amount"]),
    ],
)

DEPTHS = GoalDefinition(
    name="BingoDepthsChallenge",
    params={"crit": "Hazer"},
    binary=(BinaryField.number("crit", 0, enum="depths"),),
    text=(TextField.choice("crit", "Creature Type", 0, "depths"),) + DONE_FIELDS,
    category="Dropping a creature in the depth pit",
    describe=lambda p, data: (
        f"Drop {data.quantify(1, str(p['crit']))} into the Depths drop room (SB_D06)."
    ),
    comment=lambda p, data: (
        "Player, and creature of target type, must be in the room at the same "
        "time, and the creature's position must be below the drop."
    ),
    paint=lambda p, data: [
        _creature_icon(str(p["crit"]), data),
        icon("deathpiticon"),
        BREAK,
        text("SB_D06"),
    ],
)

DODGE_LEVIATHAN = GoalDefinition(
    name="BingoDodgeLeviathanChallenge",
    params={},
    text=DONE_FIELDS,
    category="Dodging a Leviathan",
    describe=lambda p, data: "Dodge a Leviathan's bite",
    comment=lambda p, data: (
        "Being in close proximity to a Leviathan, as it's winding up a bite, will "
        "activate this goal. (A more direct/literal interpretation - having to have "
        "been physically inside its maw, then surviving after it slams shut - was "
        "found... too challenging by playtesters.)"
    ),
    paint=lambda p, data: [icon("leviathan_dodge")],
)


def _hatch_paint(p: GoalParams, data: "GameDataService") -> List[PaintPrimitive]:
    paint: List[PaintPrimitive] = [
        icon(data.item_icon("NeedleEgg"), data.entity_color("NeedleEgg")),
        _creature_icon("SmallNeedleWorm", data),
    ]
    if p["atOnce"]:
        paint.append(icon("cycle_limit"))
    paint.extend([BREAK, progress(p["amount"])])
    return paint


HATCH_NOODLE = GoalDefinition(
    name="BingoHatchNoodleChallenge",
    params={"amount": 1, "atOnce": False},
    binary=(BinaryField.number("amount", 0), BinaryField.flag("atOnce", 4)),
    text=(
        TextField.number(),
        TextField.integer("amount", "Amount", 1),
        TextField.boolean("atOnce", "At Once", 0),
    )
    + DONE_FIELDS,
    category="Hatching noodlefly eggs",
    describe=lambda p, data: (
        f"Hatch {data.quantify(int(p['amount']), 'NeedleEgg')}"
        + (" in one cycle." if p["atOnce"] else ".")
    ),
    comment=lambda p, data: (
        "Eggs must be hatched where the player is sheltering. Eggs stored in other "
        "shelters disappear and do not give credit towards this goal."
    ),
    paint=_hatch_paint,
)

MAUL_TYPES = GoalDefinition(
    name="BingoMaulTypesChallenge",
    params={"amount": 1},
    binary=(BinaryField.number("amount", 0),),
    text=(TextField.number(), TextField.integer("amount", "Amount", 0))
    + DONE_FIELDS
    + (TextField.blank(),),
    category="Mauling different types of creatures",
    describe=lambda p, data: f"Maul {p['amount']} different types of creatures.",
    paint=lambda p, data: [icon("artimaulcrit"), BREAK, progress(p["amount"])],
)

MAUL_X = GoalDefinition(
    name="BingoMaulXChallenge",
    params={"amount": 1},
    binary=(BinaryField.number("amount", 0, size=2),),
    text=(TextField.number(), TextField.integer("amount", "Amount", 0)) + DONE_FIELDS,
    category="Mauling creatures a certain amount of times",
    describe=lambda p, data: f"Maul creatures {p['amount']} times.",
    paint=lambda p, data: [icon("artimaul"), BREAK, progress(p["amount"])],
)


def _pin_desc(p: GoalParams, data: "GameDataService") -> str:
    crit = str(p["crit"])
    subject = data.quantify(
        int(p["amount"]), crit if crit != ANY_CREATURE else "creatures"
    )
    region = str(p["region"])
    where = data.region_name(region) if region != ANY_REGION else "different regions"
    return f"Pin {subject} to walls or floors in {where}."


def _pin_paint(p: GoalParams, data: "GameDataService") -> List[PaintPrimitive]:
    paint: List[PaintPrimitive] = [icon("pin_creature")]
    if p["crit"] != ANY_CREATURE:
        paint.append(_creature_icon(str(p["crit"]), data))
    if p["region"] == ANY_REGION:
        paint.append(icon("TravellerA"))
    else:
        paint.append(text(str(p["region"])))
    paint.extend([BREAK, progress(p["amount"])])
    return paint


PIN = GoalDefinition(
    name="BingoPinChallenge",
    params={"amount": 1, "crit": ANY_CREATURE, "region": ANY_REGION},
    binary=(
        BinaryField.number("amount", 0, size=2),
        BinaryField.number("crit", 2, enum="creatures"),
        BinaryField.number("region", 3, enum="regions"),
    ),
    text=(
        TextField.number(),
        TextField.integer("amount", "Amount", 0),
        TextField.choice("crit", "Creature Type", 1, "creatures"),
        TextField.blank(),
        TextField.choice("region", "Region", 2, "regions"),
    )
    + DONE_FIELDS,
    category="Pinning creatures to walls",
    describe=_pin_desc,
    comment=lambda p, data: (
        "A creature does not need to be alive to obtain pin credit. Sometimes a "
        "body chunk gets pinned but does not credit the challenge; keep retrying on "
        "different parts of a corpse until it works. \"Different regions\" means "
        "one pin per region, as many unique regions as pins required."
    ),
    paint=_pin_paint,
)

RIV_CELL = GoalDefinition(
    name="BingoRivCellChallenge",
    params={},
    text=DONE_FIELDS,
    category="Feeding the Rarefaction Cell to a Leviathan",
    describe=lambda p, data: (
        "Feed the Rarefaction Cell to a Leviathan (completes if you die)."
    ),
    comment=lambda p, data: (
        "Truly, the Rarefaction Cell's explosion transcends time and space; hence, "
        "this goal is awarded even if the player dies in the process. Godspeed, "
        "little Water Dancer."
    ),
    paint=lambda p, data: [
        icon("Symbol_EnergyCell"),
        icon("Kill_BigEel", data.entity_color("BigEel")),
    ],
)


def _region_or_any(region: str, data: "GameDataService") -> str:
    return data.region_name(region) if region != ANY_REGION else region


def _transport_paint(p: GoalParams, data: "GameDataService") -> List[PaintPrimitive]:
    paint: List[PaintPrimitive] = [_creature_icon(str(p["crit"]), data), BREAK]
    if p["from"] != ANY_REGION:
        paint.append(text(str(p["from"])))
    paint.append(icon("singlearrow"))
    if p["to"] != ANY_REGION:
        paint.append(text(str(p["to"])))
    return paint


TRANSPORT = GoalDefinition(
    name="BingoTransportChallenge",
    params={"from": ANY_REGION, "to": ANY_REGION, "crit": "JetFish"},
    binary=(
        BinaryField.number("from", 0, enum="regions"),
        BinaryField.number("to", 1, enum="regions"),
        BinaryField.number("crit", 2, enum="transport"),
    ),
    text=(
        TextField.choice("from", "From Region", 0, "regions"),
        TextField.choice("to", "To Region", 1, "regions"),
        TextField.choice("crit", "Creature Type", 2, "transport"),
        TextField.blank(),
    )
    + DONE_FIELDS,
    category="Transporting creatures",
    describe=lambda p, data: (
        f"Transport {data.quantify(1, str(p['crit']))} "
        f"from {_region_or_any(str(p['from']), data)} "
        f"to {_region_or_any(str(p['to']), data)}"
    ),
    comment=lambda p, data: (
        "When a specific 'From' region is selected, that creature can also be "
        "brought in from an outside region, placed on the ground, then picked up in "
        "that region, to activate it for the goal. Note: keeping a swallowable "
        "creature always in stomach will NOT count in this way, nor will throwing "
        "it up and only holding in hand, but not dropping then grabbing."
    ),
    paint=_transport_paint,
)

