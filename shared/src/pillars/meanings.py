"""Interpretation text: numerology numbers, Chinese zodiac animals, houses and transit planets."""

from __future__ import annotations

NUMEROLOGY_MEANINGS: dict[int, dict[str, str]] = {
    1: {
        "meaning": "The Leader",
        "description": "masculine, independent, direct, leadership, originality, courage, new beginnings",
    },
    2: {"meaning": "The Peacemaker", "description": "feminine, partnership, balance, peaceful"},
    3: {"meaning": "The Communicator", "description": "social, network, friendships, cheating"},
    4: {"meaning": "The Worker", "description": "stability, security, responsibility, overworking"},
    5: {"meaning": "The Adventurer", "description": "change, travel, movement, chaos"},
    6: {"meaning": "The Nurturer", "description": "family, pets, romance, intimacy, overgiving"},
    7: {"meaning": "The Seeker", "description": "spirituality, creativity, artistic"},
    8: {
        "meaning": "The Achiever",
        "description": "money, karma, power, privacy, make money fast, lose money fast",
    },
    9: {"meaning": "The Humanitarian", "description": "wisdom, growth, mastery, shamanic journey"},
    11: {
        "meaning": "The Visionary",
        "description": (
            "partnership, inspiration, intuition, and enlightenment, visionary, the dreamer, and the seer. "
            "It is the number of the psychic, the healer, and the teacher."
        ),
    },
    22: {
        "meaning": "The Master Builder",
        "description": (
            "building mastery, power, and achievement, master builder, the architect, and the engineer. "
            "It is the number of the visionary, the leader, and the manager."
        ),
    },
    33: {
        "meaning": "The Master Teacher",
        "description": (
            "compassion, healing, and guidance, master teacher, the counselor, and the mentor. "
            "It is the number of the humanitarian, the philanthropist, and the healer."
        ),
    },
}

EXTENDED_NUMEROLOGY_MEANINGS: dict[int, dict[str, str]] = {
    1: {
        "themes": "Leadership, independence, originality, self-reliance, innovation.",
        "challenges": "Ego, isolation, stubbornness, fear of dependence, controlling tendencies.",
        "gifts": "Confidence, courage, self-motivation, trailblazing energy, pioneering spirit.",
        "reflection": (
            "When I feel unsupported or unseen, how can I turn that energy into self-trust "
            "and lead myself forward with conviction?"
        ),
    },
    2: {
        "themes": "Partnership, diplomacy, intuition, harmony, sensitivity.",
        "challenges": "People-pleasing, indecision, emotional dependency, avoidance of conflict.",
        "gifts": "Empathy, balance, cooperation, deep connection, emotional intelligence.",
        "reflection": (
            "When I start doubting my worth in relationships, how can I center myself in calm "
            "confidence and co-create harmony without losing authenticity?"
        ),
    },
    3: {
        "themes": "Creativity, self-expression, joy, communication, social connection.",
        "challenges": "Scattered focus, overindulgence, superficiality, self-doubt.",
        "gifts": "Optimism, charisma, storytelling, inspiration, artistic flair.",
        "reflection": (
            "When I feel blocked or self-critical, how can I reconnect to joy and express myself "
            "as if my voice already mattered to the world?"
        ),
    },
    4: {
        "themes": "Structure, discipline, responsibility, practicality, building foundations.",
        "challenges": "Rigidity, fear of change, workaholism, limitation by routine.",
        "gifts": "Stability, reliability, endurance, groundedness, strong work ethic.",
        "reflection": (
            "When I feel trapped or stuck, what new system or boundary could I create that "
            "restores both stability and freedom?"
        ),
    },
    5: {
        "themes": "Freedom, adventure, change, curiosity, experience.",
        "challenges": "Restlessness, inconsistency, impulsiveness, avoidance of responsibility.",
        "gifts": "Adaptability, magnetism, exploration, communication, liberation.",
        "reflection": (
            "When I crave escape or stimulation, how can I channel that energy into bold change "
            "that expands—not scatters—my freedom?"
        ),
    },
    6: {
        "themes": "Responsibility, love, family, service, harmony, beauty.",
        "challenges": "Over-giving, perfectionism, control in relationships, guilt.",
        "gifts": "Compassion, healing, nurturing, community leadership, loyalty.",
        "reflection": (
            "When I feel drained by others’ needs, how can I refill my own cup so that my care "
            "comes from love instead of duty?"
        ),
    },
    7: {
        "themes": "Introspection, wisdom, spirituality, truth-seeking, research.",
        "challenges": "Isolation, cynicism, overthinking, detachment, secrecy.",
        "gifts": "Intuition, insight, intellectual depth, spiritual connection, analysis.",
        "reflection": (
            "When I feel disconnected or lost in thought, how can I turn inward not to "
            "escape—but to rediscover my connection to something greater?"
        ),
    },
    8: {
        "themes": "Power, success, ambition, material mastery, influence.",
        "challenges": "Greed, control, fear of failure, power struggles, detachment from emotions.",
        "gifts": "Leadership, manifestation, financial acumen, resilience, mastery.",
        "reflection": (
            "When I feel powerless or consumed by control, how can I realign my ambition with "
            "purpose and lead from integrity instead of fear?"
        ),
    },
    9: {
        "themes": "Completion, compassion, humanitarianism, release, spiritual wisdom.",
        "challenges": "Victim mindset, emotional burnout, martyrdom, resentment.",
        "gifts": "Forgiveness, service, global vision, empathy, transcendence.",
        "reflection": (
            "When I feel weighed down by the past, how can I choose forgiveness and let go so "
            "that compassion becomes my strength, not my wound?"
        ),
    },
    11: {
        "themes": "Intuition, illumination, spiritual leadership, visionary creativity.",
        "challenges": "Anxiety, overwhelm, self-doubt, fear of visibility.",
        "gifts": "Divine inspiration, healing presence, charisma, spiritual guidance.",
        "reflection": (
            "When fear or doubt cloud my vision, how can I ground into trust and let my intuition "
            "guide me to illuminate others through example?"
        ),
    },
    22: {
        "themes": "Master builder, large-scale manifestation, practical vision, legacy creation.",
        "challenges": "Perfectionism, pressure, burnout, fear of failure on a large scale.",
        "gifts": "Visionary leadership, grounded manifestation, world impact, legacy building.",
        "reflection": (
            "When I feel overwhelmed by the size of my dreams, how can I return to small, aligned "
            "action that anchors my vision into reality?"
        ),
    },
    33: {
        "themes": "Master teacher, unconditional love, service through wisdom and creativity.",
        "challenges": "Over-responsibility, emotional exhaustion, fear of not doing enough.",
        "gifts": "Healing communication, compassion in action, spiritual teaching, inspiration.",
        "reflection": (
            "When I feel burdened by others’ pain, how can I return to love as my teacher and "
            "allow compassion to flow without depleting me?"
        ),
    },
}

CHINESE_ZODIAC_MEANINGS: dict[str, dict[str, str]] = {
    "Rat": {
        "themes": "Intelligence, strategy, adaptability, alertness",
        "challenges": "Sneakiness, overthinking, anxiety, control",
        "gifts": "Clever solutions, resourcefulness, sharp instincts",
        "reflection": "Where am I trying to manipulate or outsmart life instead of trusting my wisdom?",
    },
    "Ox": {
        "themes": "Stability, discipline, patience, perseverance",
        "challenges": "Stubbornness, rigidity, emotional detachment",
        "gifts": "Long-term strength, grounded action, reliability",
        "reflection": "What belief am I holding onto that’s keeping me stuck?",
    },
    "Tiger": {
        "themes": "Courage, boldness, independence, rebellion",
        "challenges": "Impulsiveness, ego, aggressive dominance",
        "gifts": "Fearless leadership, catalytic energy, protector spirit",
        "reflection": "Where can I channel my fire into inspired action instead of reaction?",
    },
    "Rabbit": {
        "themes": "Grace, diplomacy, softness, intuition",
        "challenges": "Avoidance, fear of conflict, indecision",
        "gifts": "Peacekeeping, beauty, emotional intelligence",
        "reflection": "Where am I avoiding discomfort that would help me grow?",
    },
    "Dragon": {
        "themes": "Power, charisma, innovation, spiritual strength",
        "challenges": "Arrogance, drama, control issues",
        "gifts": "Visionary potential, magnetism, transformative force",
        "reflection": "Am I embodying power through presence or projection?",
    },
    "Snake": {
        "themes": "Wisdom, mysticism, charm, strategy",
        "challenges": "Manipulation, secrecy, jealousy",
        "gifts": "Deep perception, seduction, psychological mastery",
        "reflection": "Where can I speak truth instead of hiding behind illusion?",
    },
    "Horse": {
        "themes": "Freedom, movement, joy, momentum",
        "challenges": "Restlessness, burnout, lack of follow-through",
        "gifts": "Inspiration, speed, trailblazing spirit",
        "reflection": "What does freedom actually mean to me now?",
    },
    "Goat": {
        "themes": "Compassion, creativity, gentleness, emotional depth",
        "challenges": "Over-sensitivity, indecision, dependency",
        "gifts": "Artistic gifts, healing energy, nurturing leadership",
        "reflection": "Where can I hold myself the way I hold others?",
    },
    "Monkey": {
        "themes": "Wit, playfulness, innovation, communication",
        "challenges": "Scattered energy, deception, performance-based identity",
        "gifts": "Creative genius, joyful expression, sharp thinking",
        "reflection": "Am I being clever or being real?",
    },
    "Rooster": {
        "themes": "Precision, integrity, beauty, truth",
        "challenges": "Perfectionism, judgment, rigidity",
        "gifts": "Clarity, style, accountability",
        "reflection": "What would shift if I let go of being right?",
    },
    "Dog": {
        "themes": "Loyalty, justice, protection, community",
        "challenges": "Cynicism, fear-based loyalty, defensiveness",
        "gifts": "Grounded faith, service, honorable leadership",
        "reflection": "Is my loyalty empowering or enabling?",
    },
    "Pig": {
        "themes": "Compassion, pleasure, abundance, sensuality",
        "challenges": "Laziness, indulgence, victimhood",
        "gifts": "Emotional generosity, deep joy, spiritual softness",
        "reflection": "Where am I confusing comfort with fulfillment?",
    },
}

HOUSE_THEMES: tuple[str, ...] = (
    "identity, self, appearance, personal approach",
    "money, values, possessions, self-worth",
    "communication, siblings, learning, local environment",
    "home, family, roots, inner foundation",
    "creativity, romance, children, joy",
    "work, health, service, daily routine",
    "partnerships, marriage, contracts, balance",
    "intimacy, shared resources, transformation, taboo",
    "higher learning, travel, philosophy, beliefs",
    "career, public image, status, authority",
    "friendships, community, future goals",
    "spirituality, subconscious, endings, hidden realms",
)

PLANET_THEMES: dict[str, str] = {
    "Pluto": "transforms, intensifies, destroys & rebuilds, empowers, exposes, regenerates",
    "Neptune": "dissolves, spiritualizes, confuses, idealizes, inspires, transcends, mystifies",
    "Saturn": "structures, disciplines, restricts, tests, grounds, matures, crystallizes",
    "Uranus": "disrupts, liberates, shocks, awakens, innovates, revolutionizes",
    "North Node": "directs, guides, grows, evolves, pushes toward destiny, expands purpose",
    "South Node": "releases, depletes, drains, pulls back, exposes past patterns, lets go",
}

_UNKNOWN_NUMBER = {"meaning": "Unknown", "description": "Numerology meaning not found"}
_EMPTY_EXTENDED = {"themes": "", "challenges": "", "gifts": "", "reflection": ""}


def number_meaning(number: int) -> dict[str, str]:
    """Basic meaning/description for a numerology number."""
    return NUMEROLOGY_MEANINGS.get(number, _UNKNOWN_NUMBER)


def full_number_meaning(number: int) -> dict[str, str]:
    """Basic plus extended meaning (themes, challenges, gifts, reflection)."""
    return {**number_meaning(number), **EXTENDED_NUMEROLOGY_MEANINGS.get(number, _EMPTY_EXTENDED)}


def house_theme(house: int) -> str:
    return HOUSE_THEMES[house - 1]
