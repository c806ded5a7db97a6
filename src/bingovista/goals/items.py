"""
Item goals: crafting, eating, hoarding, stealing, pearls and iterator deliveries.
"""

from typing import List, TYPE_CHECKING

from ..models import GoalParams, PaintPrimitive
from .paint import BREAK, icon, progress, text
from .schema import DONE_FIELDS, BinaryField, GoalDefinition, TextField

if TYPE_CHECKING:
    from ..game_data import GameDataService

ANY_REGION = "Any Region"


def _entity_icon(name: str, data: "GameDataService") -> PaintPrimitive:
    return icon(data.entity_icon(name), data.entity_color(name))


# =============================================================================
# Crafting, eating and avoiding
# =============================================================================

CRAFT = GoalDefinition(
    name="BingoCraftChallenge",
    params={"item": "FlareBomb", "amount": 1},
    binary=(
        BinaryField.number("item", 0, enum="craft"),
        BinaryField.number("amount", 1, size=2),
    ),
    text=(
        TextField.choice("item", "Item to Craft", 0, "craft"),
        TextField.integer("amount", "Amount", 1),
        TextField.number(),
    )
    + DONE_FIELDS,
    category="Crafting items",
    describe=lambda p, data: f"Craft {data.quantify(int(p['amount']), str(p['item']))}.",
    paint=lambda p, data: [
        icon("crafticon"),
        _entity_icon(str(p["item"]), data),
        BREAK,
        progress(p["amount"]),
    ],
)


def _dont_use_desc(p: GoalParams, data: "GameDataService") -> str:
    verb = "eat" if p["isFood"] else "use"
    return f"Never {verb} {data.entity_display_name(str(p['item']))}."


DONT_USE_ITEM = GoalDefinition(
    name="BingoDontUseItemChallenge",
    params={"item": "Lantern", "isFood": False, "isCreature": False},
    binary=(
        BinaryField.number("item", 0, enum="banitem"),
        BinaryField.flag("isFood", 4),
        BinaryField.flag("isCreature", 5),
    ),
    text=(
        TextField.choice("item", "Item type", 0, "banitem"),
        TextField.number("isFood"),
        TextField.number(),
        TextField.number(),
        TextField.number("isCreature"),
    ),
    category="Avoiding items",
    describe=_dont_use_desc,
    comment=lambda p, data: (
        "\"Using\" an item involves throwing a throwable item, eating a food item, "
        "or holding any other type of item for 5 seconds. (When sheltering with "
        "insufficient food pips (currently eaten), food items in the shelter are "
        "consumed automatically. Auto-eating on shelter will not count against "
        "this goal!)"
    ),
    paint=lambda p, data: [
        icon("buttonCrossA", data.color("Unity_red")),
        _entity_icon(str(p["item"]), data),
    ],
    labels=(("Item type", "item"), ("isFood", "isFood"), ("isCreature", "isCreature")),
)

EAT = GoalDefinition(
    name="BingoEatChallenge",
    params={"amount": 1, "isCreature": False, "food": "DangleFruit"},
    binary=(
        BinaryField.number("amount", 0, size=2),
        BinaryField.flag("isCreature", 4),
        BinaryField.number("food", 2, enum="food"),
    ),
    text=(
        TextField.integer("amount", "Amount", 1),
        TextField.number(),
        TextField.number("isCreature"),
        TextField.choice("food", "Food type", 0, "food"),
    )
    + DONE_FIELDS,
    category="Eating specific food",
    describe=lambda p, data: f"Eat {data.quantify(int(p['amount']), str(p['food']))}.",
    paint=lambda p, data: [
        icon("foodSymbol"),
        _entity_icon(str(p["food"]), data),
        BREAK,
        progress(p["amount"]),
    ],
)

KARMA_FLOWER = GoalDefinition(
    name="BingoKarmaFlowerChallenge",
    params={"amount": 1},
    binary=(BinaryField.number("amount", 0, size=2),),
    text=(TextField.number(), TextField.integer("amount", "Amount", 0)) + DONE_FIELDS,
    category="Consuming Karma Flowers",
    describe=lambda p, data: (
        f"Consume {data.quantify(int(p['amount']), 'KarmaFlower')}."
    ),
    comment=lambda p, data: (
        "With this goal present on the board, flowers are spawned in the world in "
        "their normal locations. The player obtains the benefit of consuming the "
        "flower (protecting karma level). While the goal is in progress, players "
        "do not drop the flower on death. After the goal is completed or locked, a "
        "flower can drop on death as normal."
    ),
    paint=lambda p, data: [
        icon("foodSymbol"),
        icon("FlowerMarker", data.color("SaturatedGold")),
        BREAK,
        progress(p["amount"]),
    ],
)

POPCORN = GoalDefinition(
    name="BingoPopcornChallenge",
    params={"amount": 1},
    binary=(BinaryField.number("amount", 0, size=2),),
    text=(TextField.number(), TextField.integer("amount", "Amount", 0)) + DONE_FIELDS,
    category="Popping popcorn plants",
    describe=lambda p, data: (
        f"Open {data.quantify(int(p['amount']), 'popcorn plants')}."
    ),
    paint=lambda p, data: [
        icon("Symbol_Spear"),
        icon("popcorn_plant", data.color("popcorn_plant")),
        BREAK,
        progress(p["amount"]),
    ],
)

SAINT_POPCORN = GoalDefinition(
    name="BingoSaintPopcornChallenge",
    params={"amount": 1},
    binary=(BinaryField.number("amount", 0, size=2),),
    text=(TextField.number(), TextField.integer("amount", "Amount", 0)) + DONE_FIELDS,
    category="Eating popcorn plant seeds",
    describe=lambda p, data: f"Eat {data.quantify(int(p['amount']), 'Seed')}.",
    paint=lambda p, data: [
        icon("foodSymbol"),
        icon("Symbol_Seed", data.entity_color("Default")),
        BREAK,
        progress(p["amount"]),
    ],
)


# =============================================================================
# Hoarding and stealing
# =============================================================================

def _hoard_desc(p: GoalParams, data: "GameDataService") -> str:
    amount = int(p["amount"])
    if p["anyShelter"]:
        where = "any shelter(s)."
    elif amount == 1:
        where = "a shelter."
    else:
        where = "the same shelter."
    return f"Store {data.quantify(amount, str(p['item']))} in {where}"


ITEM_HOARD = GoalDefinition(
    name="BingoItemHoardChallenge",
    params={"anyShelter": False, "amount": 1, "item": "FirecrackerPlant"},
    binary=(
        BinaryField.flag("anyShelter", 4),
        BinaryField.number("amount", 0),
        BinaryField.number("item", 1, enum="expobject"),
    ),
    text=(
        TextField.boolean("anyShelter", "Any Shelter", 2),
        TextField.number(),
        TextField.integer("amount", "Amount", 0),
        TextField.choice("item", "Item", 1, "expobject"),
    )
    + DONE_FIELDS
    + (TextField.blank(),),
    # Layout used before the "Any Shelter" option existed
    legacy_text=(
        (
            TextField.integer("amount", "Amount", 1),
            TextField.choice("item", "Item", 0, "expobject"),
        )
        + DONE_FIELDS,
    ),
    category="Hoarding items in shelters",
    describe=_hoard_desc,
    comment=lambda p, data: (
        "The 'Any Shelter' option counts the total across any shelters in the "
        "world. Counts are per item ID, and are updated on shelter close. Counts "
        "never go down, so the items are free to use after bringing them into a "
        "shelter, including eating or removing them. Because items are tracked by "
        "ID, this goal cannot be cheesed by taking the same items between multiple "
        "shelters; multiple unique items must be hoarded. In short, it's the act of "
        "hoarding (putting new items in a shelter and closing the shelter) that "
        "counts up."
    ),
    paint=lambda p, data: [
        icon("doubleshelter" if p["anyShelter"] else "ShelterMarker"),
        icon(data.item_icon(str(p["item"])), data.entity_color(str(p["item"]))),
        BREAK,
        progress(p["amount"]),
    ],
)


def _steal_desc(p: GoalParams, data: "GameDataService") -> str:
    victim = "a Scavenger Toll." if p["toll"] else "Scavengers."
    return (
        f"Steal {p['amount']} {data.entity_display_name(str(p['item']))} "
        f"from {victim}"
    )


def _steal_paint(p: GoalParams, data: "GameDataService") -> List[PaintPrimitive]:
    item = str(p["item"])
    paint: List[PaintPrimitive] = [
        icon("steal_item"),
        icon(data.item_icon(item), data.entity_color(item)),
    ]
    if p["toll"]:
        paint.append(icon("scavtoll", scale=0.8))
    else:
        paint.append(
            icon(data.creature_icon("Scavenger"), data.entity_color("Scavenger"))
        )
    paint.extend([BREAK, progress(p["amount"])])
    return paint


STEAL = GoalDefinition(
    name="BingoStealChallenge",
    params={"item": "Spear", "toll": False, "amount": 1},
    binary=(
        BinaryField.number("item", 0, enum="theft"),
        BinaryField.flag("toll", 4),
        BinaryField.number("amount", 1, size=2),
    ),
    text=(
        TextField.choice("item", "Item", 1, "theft"),
        TextField.boolean("toll", "From Scavenger Toll", 0),
        TextField.number(),
        TextField.integer("amount", "Amount", 2),
    )
    + DONE_FIELDS,
    category="Stealing items",
    describe=_steal_desc,
    paint=_steal_paint,
    labels=(("Item", "item"), ("Amount", "amount"), ("From Scavenger Toll", "toll")),
)

NO_NEEDLE_TRADING = GoalDefinition(
    name="BingoNoNeedleTradingChallenge",
    params={},
    text=DONE_FIELDS,
    category="Avoiding gifting Needles to Scavengers",
    describe=lambda p, data: "Do not gift Needles to Scavengers.",
    paint=lambda p, data: [
        icon("spearneedle"),
        icon("commerce"),
        icon("Kill_Scavenger"),
        BREAK,
        icon("buttonCrossA", data.color("Unity_red")),
    ],
)


# =============================================================================
# Pearls
# =============================================================================

def _pearl_origin(pearl: str, data: "GameDataService") -> str:
    if pearl == "MS":
        return f"Old {data.table('region_names').get('GW', 'GW')}"
    region = data.pearl_region(pearl)
    if region == "CL":
        # Only Saint reaches this region
        name = data.table("region_names_saint").get(region, region)
    else:
        name = data.table("region_names").get(region, region)
    if pearl == "DM":
        name = f"{data.table('region_names').get('DM', 'DM')} / {name}"
    return name


def _collect_pearl_desc(p: GoalParams, data: "GameDataService") -> str:
    if p["specific"]:
        pearl = str(p["pearl"])
        return (
            f"Collect the {data.pearl_name(pearl)} pearl "
            f"from {_pearl_origin(pearl, data)}."
        )
    return f"Collect {data.quantify(int(p['amount']), 'colored pearls')}."


def _collect_pearl_paint(p: GoalParams, data: "GameDataService") -> List[PaintPrimitive]:
    if p["specific"]:
        pearl = str(p["pearl"])
        return [
            text(pearl),
            BREAK,
            icon(
                "Symbol_Pearl",
                data.pearl_color(pearl),
                background=icon("radialgradient"),
            ),
            BREAK,
            progress(1),
        ]
    return [
        icon("pearlhoard_color", data.entity_color("Pearl")),
        BREAK,
        progress(p["amount"]),
    ]


COLLECT_PEARL = GoalDefinition(
    name="BingoCollectPearlChallenge",
    params={"specific": True, "pearl": "CC", "amount": 1},
    binary=(
        BinaryField.flag("specific", 4),
        BinaryField.number("pearl", 0, enum="pearls"),
        BinaryField.number("amount", 1, size=2),
    ),
    text=(
        TextField.boolean("specific", "Specific Pearl", 0),
        TextField.choice("pearl", "Pearl", 1, "pearls"),
        TextField.number(),
        TextField.integer("amount", "Amount", 3),
    )
    + DONE_FIELDS
    + (TextField.blank(),),
    category="Collecting pearls",
    describe=_collect_pearl_desc,
    comment=lambda p, data: (
        "When collecting multiple pearls, this challenge acts like a flexible The "
        "Scholar passage. When collecting single pearls, the amount is unused; when "
        "collecting multiple, the location is unused."
    ),
    paint=_collect_pearl_paint,
)


def _pearl_hoard_desc(p: GoalParams, data: "GameDataService") -> str:
    amount = int(p["amount"])
    kind = "common pearls" if p["common"] else "colored pearls"
    if amount == 1:
        kind = kind[:-1]
    region = str(p["region"])
    where = data.region_name(region) if region != ANY_REGION else "any region"
    return f"Store {amount} {kind} in a shelter in {where}."


PEARL_HOARD = GoalDefinition(
    name="BingoPearlHoardChallenge",
    params={"common": False, "amount": 1, "region": ANY_REGION},
    binary=(
        BinaryField.flag("common", 4),
        BinaryField.number("amount", 0, size=2),
        BinaryField.number("region", 2, enum="regions"),
    ),
    text=(
        TextField.boolean("common", "Common Pearls", 0),
        TextField.integer("amount", "Amount", 1),
        TextField.choice("region", "In Region", 2, "regions"),
    )
    + DONE_FIELDS,
    category="Hoarding pearls in shelters",
    describe=_pearl_hoard_desc,
    comment=lambda p, data: (
        "Note: faded pearls (colored pearl spawns in Saint campaign) do not count "
        "toward a \"common pearls\" goal."
    ),
    paint=lambda p, data: [
        icon("ShelterMarker"),
        icon(
            "pearlhoard_normal" if p["common"] else "pearlhoard_color",
            data.entity_color("Pearl"),
        ),
        text(str(p["region"])),
        BREAK,
        progress(p["amount"]),
    ],
)

PEARL_DELIVERY = GoalDefinition(
    name="BingoPearlDeliveryChallenge",
    params={"region": "CC"},
    binary=(BinaryField.number("region", 0, enum="regions"),),
    text=(TextField.choice("region", "Pearl from Region", 0, "regions"),)
    + DONE_FIELDS,
    category="Delivering colored pearls to an Iterator",
    describe=lambda p, data: (
        f"Deliver {data.region_name(str(p['region']))} colored pearl to "
        "Looks To The Moon (Artificer: Five Pebbles)"
    ),
    paint=lambda p, data: [
        text(str(p["region"])),
        icon("Symbol_Pearl", data.entity_color("Pearl")),
        BREAK,
        icon("singlearrow", rotation=90),
        BREAK,
        icon("GuidanceMoon", data.color("GuidanceMoon")),
    ],
)


# =============================================================================
# Iterators
# =============================================================================

NEURON_DELIVERY = GoalDefinition(
    name="BingoNeuronDeliveryChallenge",
    params={"amount": 1},
    binary=(BinaryField.number("amount", 0, size=2),),
    text=(TextField.integer("amount", "Amount of Neurons", 0), TextField.number())
    + DONE_FIELDS,
    category="Gifting neurons",
    describe=lambda p, data: (
        f"Deliver {data.quantify(int(p['amount']), 'Neurons')} to Looks to the Moon."
    ),
    paint=lambda p, data: [
        icon("Symbol_Neuron"),
        icon("singlearrow"),
        icon("GuidanceMoon", data.color("GuidanceMoon")),
        BREAK,
        progress(p["amount"]),
    ],
)


def _green_neuron_paint(p: GoalParams, data: "GameDataService") -> List[PaintPrimitive]:
    paint: List[PaintPrimitive] = [
        icon("GuidanceNeuron", data.color("GuidanceNeuron")),
        icon("singlearrow"),
    ]
    if p["moon"]:
        paint.append(icon("GuidanceMoon", data.color("GuidanceMoon")))
    else:
        paint.append(icon("nomscpebble", data.color("nomscpebble")))
    return paint


GREEN_NEURON = GoalDefinition(
    name="BingoGreenNeuronChallenge",
    params={"moon": True},
    binary=(BinaryField.flag("moon", 4),),
    text=(TextField.boolean("moon", "Looks to the Moon", 0),) + DONE_FIELDS,
    category="Delivering the green neuron",
    describe=lambda p, data: (
        "Reactivate Looks to the Moon."
        if p["moon"]
        else "Deliver the green neuron to Five Pebbles."
    ),
    comment=lambda p, data: (
        "The green neuron only has to enter the screen the iterator is on and "
        "start the cutscene; waiting for full dialog/startup is not required for "
        "credit."
    ),
    paint=_green_neuron_paint,
)

SAINT_DELIVERY = GoalDefinition(
    name="BingoSaintDeliveryChallenge",
    params={},
    text=DONE_FIELDS,
    category="Delivering the music pearl to Five Pebbles",
    describe=lambda p, data: "Deliver the music pearl to Five Pebbles",
    comment=lambda p, data: (
        "Credit is awarded when Five Pebbles resumes playing the pearl; wait for "
        "dialog to finish, and place the pearl within reach."
    ),
    paint=lambda p, data: [
        icon("memoriespearl"),
        icon("singlearrow"),
        icon("nomscpebble", data.color("nomscpebble")),
    ],
)


def _moon_cloak_paint(p: GoalParams, data: "GameDataService") -> List[PaintPrimitive]:
    paint: List[PaintPrimitive] = [
        icon("Symbol_MoonCloak", data.entity_color("MoonCloak"))
    ]
    if p["deliver"]:
        paint.extend([icon("singlearrow"), icon("GuidanceMoon", data.color("GuidanceMoon"))])
    return paint


MOON_CLOAK = GoalDefinition(
    name="BingoMoonCloakChallenge",
    params={"deliver": False},
    binary=(BinaryField.flag("deliver", 4),),
    text=(TextField.boolean("deliver", "Deliver", 0),) + DONE_FIELDS,
    category="Moon's Cloak",
    describe=lambda p, data: (
        "Deliver the Cloak to Moon" if p["deliver"] else "Obtain Moon's Cloak"
    ),
    comment=lambda p, data: (
        "With only a 'Deliver' goal on the board, players will spawn with the Cloak "
        "in the starting shelter, and must deliver it to Looks To The Moon. If both "
        "Obtain and Deliver are present, players must obtain the Cloak from "
        "Submerged Superstructure first, and then deliver it."
    ),
    paint=_moon_cloak_paint,
)
