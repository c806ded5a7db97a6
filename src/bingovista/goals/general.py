"""
General goals: free text, passages, scores, trading and arena unlocks.
"""

from typing import List, TYPE_CHECKING

from ..models import GoalParams, PaintPrimitive
from .paint import BREAK, icon, progress, text
from .schema import DONE_FIELDS, BinaryField, GoalDefinition, TextField

if TYPE_CHECKING:
    from ..game_data import GameDataService


# =============================================================================
# BingoChallenge: empty challenge class, also used for placeholders
# =============================================================================

CHALLENGE = GoalDefinition(
    name="BingoChallenge",
    params={"desc": ""},
    binary=(BinaryField.string("desc", 0),),
    text=(TextField.text("desc"), TextField.blank()),
    category="Empty challenge class",
    describe=lambda p, data: str(p["desc"]),
    paint=lambda p, data: [text("∅")],
)


# =============================================================================
# Passages
# =============================================================================

def _achievement_paint(p: GoalParams, data: "GameDataService") -> List[PaintPrimitive]:
    return [
        icon("smallEmptyCircle"),
        icon(f"{p['passage']}A"),
        icon("smallEmptyCircle"),
    ]


ACHIEVEMENT = GoalDefinition(
    name="BingoAchievementChallenge",
    params={"passage": "Survivor"},
    binary=(BinaryField.number("passage", 0, enum="passage"),),
    text=(TextField.choice("passage", "Passage", 0, "passage"),) + DONE_FIELDS,
    category="Obtaining Passages",
    describe=lambda p, data: f"Earn {data.passage_name(str(p['passage']))} passage.",
    paint=_achievement_paint,
)


# =============================================================================
# Scores
# =============================================================================

CYCLE_SCORE = GoalDefinition(
    name="BingoCycleScoreChallenge",
    params={"amount": 1},
    binary=(BinaryField.number("amount", 0, size=2),),
    text=(TextField.integer("amount", "Target Score", 0),) + DONE_FIELDS,
    category="Scoring cycle points",
    describe=lambda p, data: (
        f"Earn {p['amount']} points from creature kills in a single cycle."
    ),
    paint=lambda p, data: [
        icon("Multiplayer_Star"),
        icon("cycle_limit"),
        BREAK,
        progress(p["amount"]),
    ],
)

GLOBAL_SCORE = GoalDefinition(
    name="BingoGlobalScoreChallenge",
    params={"amount": 1},
    binary=(BinaryField.number("amount", 0, size=2),),
    text=(TextField.number(), TextField.integer("amount", "Target Score", 0))
    + DONE_FIELDS,
    category="Scoring global points",
    describe=lambda p, data: f"Earn {p['amount']} points from creature kills.",
    paint=lambda p, data: [icon("Multiplayer_Star"), BREAK, progress(p["amount"])],
)


def _hell_paint(p: GoalParams, data: "GameDataService") -> List[PaintPrimitive]:
    return [
        icon("completechallenge"),
        progress(p["amount"]),
        BREAK,
        icon("buttonCrossA", data.color("Unity_red")),
        icon("Multiplayer_Death"),
    ]


HELL = GoalDefinition(
    name="BingoHellChallenge",
    params={"amount": 1},
    binary=(BinaryField.number("amount", 0),),
    text=(TextField.number(), TextField.integer("amount", "Amount", 0)) + DONE_FIELDS,
    category="Not dying before completing challenges",
    describe=lambda p, data: (
        "Do not die before completing "
        f"{data.quantify(int(p['amount']), 'bingo challenges')}."
    ),
    paint=_hell_paint,
)


# =============================================================================
# Scavenger Merchants
# =============================================================================

TRADE = GoalDefinition(
    name="BingoTradeChallenge",
    params={"amount": 1},
    binary=(BinaryField.number("amount", 0, size=2),),
    text=(TextField.number(), TextField.integer("amount", "Value", 0)) + DONE_FIELDS,
    category="Trading items to Merchants",
    describe=lambda p, data: (
        f"Trade {p['amount']} points worth of items to Scavenger Merchants."
    ),
    comment=lambda p, data: (
        "A trade occurs when: 1. a Scavenger sees you with item in hand, "
        "2. sees you drop the item, and 3. picks up that item. When the Scavenger "
        "is also a Merchant, points will be awarded. Any item can be traded once "
        "to award points according to its value; this includes items initially "
        "held (then dropped/traded) by Scavenger Merchants. If an item seems to "
        "have been ignored or missed, try trading it again.\n"
        "Stealing and murder will not result in points being awarded."
    ),
    paint=lambda p, data: [icon("scav_merchant"), BREAK, progress(p["amount"])],
)


def _traded_desc(p: GoalParams, data: "GameDataService") -> str:
    amount = int(p["amount"])
    noun = "item" if amount == 1 else "items"
    return (
        f"Trade {amount} {noun} from Scavenger Merchants "
        "to other Scavenger Merchants."
    )


TRADE_TRADED = GoalDefinition(
    name="BingoTradeTradedChallenge",
    params={"amount": 1},
    binary=(BinaryField.number("amount", 0, size=2),),
    text=(
        TextField.number(),
        TextField.integer("amount", "Amount of Items", 0),
        TextField.blank("empty"),
    )
    + DONE_FIELDS,
    category="Trading already traded items",
    describe=_traded_desc,
    comment=lambda p, data: (
        "A trade occurs when: 1. a Scavenger sees you with item in hand, "
        "2. sees you drop the item, and 3. picks up that item. While this "
        "challenge is active, any item dropped by a Merchant, due to a trade, "
        "will be \"blessed\" and thereafter bear a mark indicating its "
        "eligibility for this challenge.\n"
        "In a Merchant room, the Merchant bears a '✓' tag to show who you should "
        "trade with; other Scavengers in the room are tagged with 'X'.\n"
        "A \"blessed\" item can then be brought to any other Merchant and traded, "
        "to award credit.\n"
        "Stealing from or murdering a Merchant will not result in \"blessed\" "
        "items dropping (unless they were already traded)."
    ),
    paint=lambda p, data: [
        icon("scav_merchant"),
        icon("Menu_Symbol_Shuffle"),
        icon("scav_merchant"),
        BREAK,
        progress(p["amount"]),
    ],
)


# =============================================================================
# Arena unlocks
# =============================================================================

UNLOCK_COLORS = {
    "blue": "AntiGold",
    "gold": "TokenDefault",
    "green": "GreenColor",
    "red": "RedColor",
}


def _unlock_subject(token: str, data: "GameDataService") -> str:
    kind = data.unlock_kind(token)
    if kind == "blue":
        names = data.table("creature_names")
        return names.get(token) or data.table("item_names").get(token, token)
    if kind == "gold":
        return f"{data.gold_unlock_name(token)} Arenas"
    if kind == "green":
        return f"{token} character"
    if kind == "red":
        region = token.split("-", 1)[0]
        return f"{data.region_name(region) or region} Safari"
    return token


def _unlock_paint(p: GoalParams, data: "GameDataService") -> List[PaintPrimitive]:
    token = str(p["unlock"])
    kind = data.unlock_kind(token)
    badge = data.color(UNLOCK_COLORS[kind]) if kind else data.color("Unity_white")
    paint: List[PaintPrimitive] = [icon("arenaunlock", badge), BREAK]
    if kind == "blue":
        name = data.creature_icon(token) or data.item_icon(token)
        paint.append(icon(name, data.entity_color(token)))
    elif kind == "green":
        paint.append(icon("Kill_Slugcat", data.color(f"Slugcat_{token}")))
    else:
        paint.append(text(token))
    return paint


UNLOCK = GoalDefinition(
    name="BingoUnlockChallenge",
    params={"unlock": "SingularityBomb"},
    binary=(BinaryField.number("unlock", 0, size=2, enum="unlocks"),),
    text=(TextField.choice("unlock", "Unlock", 0, "unlocks"),) + DONE_FIELDS,
    category="Getting Arena Unlocks",
    describe=lambda p, data: f"Get the {_unlock_subject(str(p['unlock']), data)} unlock.",
    paint=_unlock_paint,
)
