"""Card definition files used across the tests."""

MAGE_HERO = '''// Created by the Custom Card Creator

/**
 * @type {import("../../src/types").Blueprint}
 */
module.exports = {
    name: "Mage Starting Hero",
    displayName: "Jaina Proudmoore",
    desc: "Mage starting hero",
    mana: 0,
    type: "Hero",
    class: "Mage",
    rarity: "Free",
    set: "Core",
    hpDesc: "Deal 1 damage.",
    uncollectible: true,
    id: 97,

    /**
     * @type {import("../../src/types").KeywordMethod}
     */
    heropower(plr, game, self) {
        const target = game.interact.selectTarget("Deal 1 damage.", true);

        game.attack(1, target);
    }
}
'''

ROGUE_HERO = '''module.exports = {
    name: "Rogue Starting Hero",
    displayName: "Valeera Sanguinar",
    desc: "Rogue starting hero",
    mana: 0,
    type: "Hero",
    class: "Rogue",
    rarity: "Free",
    uncollectible: true,
    id: 12,

    heropower(plr, game, self) {
        plr.setWeapon(new game.Card("Wicked Knife", plr));
    }
}
'''

DEATH_KNIGHT_HERO = '''module.exports = {
    name: "Death Knight Starting Hero",
    displayName: "The Lich King",
    desc: "Death Knight starting hero",
    mana: 0,
    type: "Hero",
    class: "Death Knight",
    rarity: "Free",
    uncollectible: true,
    id: 13,

    heropower(plr, game, self) {
        game.summonMinion(new game.Card("Ghoul", plr), plr);
    }
}
'''

DEFROST = '''module.exports = {
    name: "Defrost",
    desc: "Draw a card. Spend 2 Corpses to draw another.",
    mana: 2,
    type: "Spell",
    class: "Death Knight",
    rarity: "Rare",
    set: "Core",
    spellClass: "Frost",
    runes: "F",
    id: 1,

    cast(plr, game, card) {
        plr.drawCard();

        plr.tradeCorpses(2, () => plr.drawCard());
    }
}
'''

SOULSTEALER = '''module.exports = {
    name: "Soulstealer",
    stats: [5, 5],
    desc: "Battlecry: Destroy all other minions. Gain 1 Corpse for each enemy destroyed.",
    mana: 8,
    type: "Minion",
    tribe: "None",
    class: "Death Knight",
    rarity: "Epic",
    runes: "BB",
    id: 2,

    battlecry(plr, game, self) {
        game.board.forEach(minion => minion.kill());
    }
}
'''

PEASANT = '''module.exports = {
    name: "Peasant",
    stats: [2, 1],
    desc: "At the start of your turn, draw a card.",
    mana: 1,
    tribe: "None",
    class: "Neutral",
    rarity: "Common",
    set: "United in Stormwind",
    id: 35,

    startofturn(plr, game, card) {
        plr.drawCard();
    }
}
'''

FIREBALL = '''module.exports = {
    name: "Fireball",
    desc: "Deal 6 damage.",
    mana: 4,
    type: "Spell",
    class: "Mage",
    rarity: "Common",
    id: 40,
}

module.exports.aliases = ["Pyro"];
'''

RAISE_DEAD = '''module.exports = {
    name: "Raise Dead",
    desc: "Deal 3 damage to your hero. Return two friendly minions that died this game to your hand.",
    mana: 0,
    type: "Spell",
    class: "Priest / Warlock",
    rarity: "Common",
    id: 24,

    cast(plr, game, self) {
        plr.remHealth(3);
    }
}
'''

INF_MANA = '''module.exports = {
    name: "Inf Mana",
    desc: "Set your mana to 10.",
    mana: 0,
    class: "Neutral",
    rarity: "Free",
    set: "Tests",
    uncollectible: true,

    cast(plr, game, self) {
        plr.gainMana(1000, true);
    }
}
'''

TYPESCRIPT_CARD = '''import { Blueprint } from "@Game/types.js";

export const blueprint: Blueprint = {
    name: "Onyxian Whelp",
    cost: 1,

    test(plr, game, self) {}
};
'''

NO_EXPORT = '''const card = {
    name: "Lost",
    mana: 1,
};

exports.card = card;
'''

SINGLE_QUOTED = '''module.exports = {
    name: 'Single Quoted',
    mana: 1,

    cast() {}
}
'''

NAMELESS = '''module.exports = {
    displayName: "Nobody",
    mana: 3,

    cast() {}
}
'''
