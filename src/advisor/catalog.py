"""Static suggestion tables.

Every mood maps to a MoodSuggestionSet: a fixed candidate list plus optional
theme-keyed variants (only joyful has any). Fixed tables outside the mood sets
carry their own base relevance.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from mood.lexicon import LexiconError
from shared_types import MoodType, SuggestionType, Theme

S = SuggestionType


@dataclass(frozen=True)
class SuggestionTemplate:
    type: SuggestionType
    title: str
    description: str
    duration: str
    reason: str
    keywords: tuple[str, ...] = ()
    theme: Optional[Theme] = None
    base_relevance: float = 0.5


@dataclass(frozen=True)
class MoodSuggestionSet:
    candidates: tuple[SuggestionTemplate, ...]
    contextual_variants: Mapping[Theme, SuggestionTemplate] = field(
        default_factory=lambda: MappingProxyType({})
    )


def _variant(theme: Theme, type_: SuggestionType, title: str, description: str, duration: str, reason: str):
    return SuggestionTemplate(type_, title, description, duration, reason, theme=theme)


MOOD_SUGGESTIONS: Mapping[MoodType, MoodSuggestionSet] = MappingProxyType({
    MoodType.JOYFUL: MoodSuggestionSet(
        candidates=(
            SuggestionTemplate(
                S.GROWTH, "Amplify Your Joy",
                "Write about what brought you joy today and how you can create more of these moments.",
                "10-15 minutes", "Channel positive energy into intentional joy creation",
                ("celebration", "success", "achievement", "love", "happiness"),
            ),
            SuggestionTemplate(
                S.REFLECTION, "Gratitude Expansion",
                "List 10 things you're grateful for, from the tiniest details to life's biggest gifts.",
                "10 minutes", "Deepen appreciation and extend positive feelings",
                ("grateful", "thankful", "blessed", "appreciate"),
            ),
            SuggestionTemplate(
                S.GROWTH, "Share Your Light",
                "Think of someone who could use encouragement and send them a kind message.",
                "5-10 minutes", "Spread joy and strengthen connections",
                ("friend", "family", "connection", "love", "support"),
            ),
        ),
        contextual_variants=MappingProxyType({
            Theme.WORK: _variant(
                Theme.WORK, S.GROWTH, "Career Momentum Building",
                "Use this positive work energy to plan your next professional goal or skill development.",
                "15-20 minutes", "Leverage work satisfaction for career growth",
            ),
            Theme.RELATIONSHIP: _variant(
                Theme.RELATIONSHIP, S.REFLECTION, "Love Appreciation Ritual",
                "Write a heartfelt note about what you love about your relationships and share it.",
                "10-15 minutes", "Strengthen bonds during positive emotional states",
            ),
            Theme.ACHIEVEMENT: _variant(
                Theme.ACHIEVEMENT, S.GROWTH, "Success Pattern Analysis",
                "Analyze what led to this achievement and create a blueprint for future success.",
                "20 minutes", "Learn from success to replicate positive outcomes",
            ),
        }),
    ),
    MoodType.EXCITED: MoodSuggestionSet(candidates=(
        SuggestionTemplate(
            S.GROWTH, "Channel Your Energy",
            "Use this excitement to plan or work on something meaningful to you.",
            "15-30 minutes", "Transform excitement into productive action",
            ("energy", "motivation", "goal", "plan", "action"),
        ),
        SuggestionTemplate(
            S.REFLECTION, "Future Visioning",
            "Visualize your goals and dreams with this positive energy as fuel.",
            "10-15 minutes", "Harness enthusiasm for goal setting",
            ("future", "dream", "vision", "goal", "possibility"),
        ),
        SuggestionTemplate(
            S.MOOD_BOOST, "Celebration Dance",
            "Put on your favorite music and move your body to celebrate this feeling.",
            "5-10 minutes", "Express and embody your excitement",
            ("music", "movement", "celebration", "energy", "dance"),
        ),
    )),
    MoodType.CONTENT: MoodSuggestionSet(candidates=(
        SuggestionTemplate(
            S.REFLECTION, "Peaceful Presence",
            "Sit quietly and simply appreciate this moment of contentment.",
            "10-15 minutes", "Savor and deepen feelings of peace",
            ("peace", "calm", "content", "satisfied", "balanced"),
        ),
        SuggestionTemplate(
            S.GROWTH, "Gentle Goal Setting",
            "From this calm space, consider what small steps you'd like to take forward.",
            "15 minutes", "Use contentment as foundation for growth",
            ("goal", "progress", "growth", "improvement"),
        ),
        SuggestionTemplate(
            S.REFLECTION, "Life Appreciation",
            "Reflect on the journey that brought you to this peaceful moment.",
            "10 minutes", "Acknowledge your path and progress",
            ("journey", "path", "progress", "appreciation"),
        ),
    )),
    MoodType.PEACEFUL: MoodSuggestionSet(candidates=(
        SuggestionTemplate(
            S.REFLECTION, "Mindful Meditation",
            "Extend this peace with 15 minutes of silent meditation or gentle breathing.",
            "15-20 minutes", "Deepen and sustain peaceful feelings",
            ("meditation", "breath", "stillness", "quiet", "calm"),
        ),
        SuggestionTemplate(
            S.GROWTH, "Wisdom Reflection",
            "Consider what this peace is teaching you about yourself and life.",
            "10-15 minutes", "Extract insights from peaceful states",
            ("wisdom", "insight", "understanding", "clarity"),
        ),
        SuggestionTemplate(
            S.STRESS_RELIEF, "Body Blessing",
            "Do a loving body scan, sending gratitude to each part of yourself.",
            "15 minutes", "Extend peace throughout your being",
            ("body", "gratitude", "self-love", "appreciation"),
        ),
    )),
    MoodType.NEUTRAL: MoodSuggestionSet(candidates=(
        SuggestionTemplate(
            S.REFLECTION, "Gentle Check-In",
            'Explore what "neutral" feels like in your body and what it might need.',
            "10 minutes", "Understand and honor neutral states",
            ("feeling", "body", "need", "awareness"),
        ),
        SuggestionTemplate(
            S.MOOD_BOOST, "Curiosity Practice",
            "Find one thing around you to observe with fresh eyes and wonder.",
            "5-10 minutes", "Spark interest and engagement",
            ("curiosity", "wonder", "explore", "discover"),
        ),
        SuggestionTemplate(
            S.GROWTH, "Small Step Forward",
            "Choose one tiny action that would make you feel slightly more alive.",
            "5-15 minutes", "Gently move from neutral toward positive",
            ("action", "step", "movement", "progress"),
        ),
    )),
    MoodType.MELANCHOLY: MoodSuggestionSet(candidates=(
        SuggestionTemplate(
            S.STRESS_RELIEF, "Gentle Self-Compassion",
            "Place your hand on your heart and speak to yourself as you would a dear friend.",
            "10 minutes", "Offer yourself comfort during difficult feelings",
            ("sad", "down", "heavy", "lonely", "empty"),
        ),
        SuggestionTemplate(
            S.REFLECTION, "Honoring Sadness",
            "Allow yourself to feel this emotion fully without trying to fix or change it.",
            "15 minutes", "Validate and process difficult emotions",
            ("sadness", "grief", "loss", "missing", "hurt"),
        ),
        SuggestionTemplate(
            S.MOOD_BOOST, "Tiny Comfort Ritual",
            "Make yourself a warm drink, wrap in a soft blanket, or do something nurturing.",
            "10-20 minutes", "Provide gentle comfort and care",
            ("comfort", "care", "nurture", "warmth", "gentle"),
        ),
    )),
    MoodType.ANXIOUS: MoodSuggestionSet(candidates=(
        SuggestionTemplate(
            S.STRESS_RELIEF, "4-7-8 Breathing",
            "Breathe in for 4, hold for 7, exhale for 8. Repeat 4-8 times to calm your nervous system.",
            "5-10 minutes", "Activate parasympathetic nervous system",
            ("anxious", "worried", "stressed", "overwhelmed", "panic"),
        ),
        SuggestionTemplate(
            S.STRESS_RELIEF, "Grounding Technique",
            "Name 5 things you see, 4 you can touch, 3 you hear, 2 you smell, 1 you taste.",
            "5 minutes", "Bring awareness back to the present moment",
            ("anxiety", "worry", "fear", "nervous", "tense"),
        ),
        SuggestionTemplate(
            S.STRESS_RELIEF, "Progressive Muscle Relaxation",
            "Tense and release each muscle group, starting from your toes up to your head.",
            "15-20 minutes", "Release physical tension and anxiety",
            ("tension", "muscle", "relaxation", "body", "release"),
        ),
    )),
    MoodType.FRUSTRATED: MoodSuggestionSet(candidates=(
        SuggestionTemplate(
            S.STRESS_RELIEF, "Physical Release",
            "Do jumping jacks, punch a pillow, or take a brisk walk to move the energy.",
            "5-15 minutes", "Channel frustration into healthy physical expression",
            ("frustrated", "angry", "annoyed", "mad", "irritated"),
        ),
        SuggestionTemplate(
            S.REFLECTION, "Frustration Dialogue",
            "Write an uncensored letter expressing your frustration, then burn or tear it up.",
            "15-20 minutes", "Release pent-up emotions safely",
            ("anger", "rage", "fury", "upset", "fed up"),
        ),
        SuggestionTemplate(
            S.GROWTH, "Problem-Solving Mode",
            "Once calmer, brainstorm three possible solutions or ways to improve the situation.",
            "15 minutes", "Channel frustration into constructive action",
            ("solution", "problem", "action", "improvement", "change"),
        ),
    )),
})

DEFAULT_SUGGESTIONS: tuple[SuggestionTemplate, ...] = (
    SuggestionTemplate(
        S.REFLECTION, "Mindful Check-In",
        "Take a moment to notice how you're feeling in your body and mind right now.",
        "5-10 minutes", "Build self-awareness and presence", base_relevance=0.7,
    ),
    SuggestionTemplate(
        S.STRESS_RELIEF, "Three Deep Breaths",
        "Take three slow, deep breaths, focusing on the sensation of breathing.",
        "2-3 minutes", "Simple way to center and calm yourself", base_relevance=0.8,
    ),
    SuggestionTemplate(
        S.MOOD_BOOST, "Gratitude Moment",
        "Think of one thing you're grateful for right now, however small.",
        "2-5 minutes", "Shift focus to positive aspects of life", base_relevance=0.6,
    ),
)

# Pattern-based candidates
STRESS_RESET = SuggestionTemplate(
    S.STRESS_RELIEF, "Weekly Stress Reset",
    "Plan 3 stress-relief activities for this week: one physical, one mental, one social.",
    "20 minutes planning", "Recent pattern of stress detected in your entries", base_relevance=0.8,
)
POSITIVE_MOMENTUM = SuggestionTemplate(
    S.GROWTH, "Positive Momentum Amplification",
    "Identify the key factors contributing to your positive streak and create a plan to maintain them.",
    "15-20 minutes", "Strong positive pattern detected in recent entries", base_relevance=0.9,
)
RELATIONSHIP_APPRECIATION = SuggestionTemplate(
    S.REFLECTION, "Relationship Appreciation Practice",
    "Write about the people who matter most to you and plan a meaningful way to show appreciation.",
    "15 minutes", "Relationship themes prominent in your recent reflections", base_relevance=0.7,
)

# Date-based candidates
SUNDAY_SOUL_RESET = SuggestionTemplate(
    S.STRESS_RELIEF, "Sunday Soul Reset",
    "Create a nurturing routine: warm bath, gentle music, and self-compassion practice.",
    "45-60 minutes", "Sunday renewal after challenging times", base_relevance=0.8,
)
WEEKLY_WISDOM = SuggestionTemplate(
    S.REFLECTION, "Weekly Wisdom Gathering",
    "Reflect on the week's lessons and set 3 intentions for the coming week.",
    "20-30 minutes", "Sunday is perfect for weekly reflection and planning", base_relevance=0.7,
)
MORNING_ANXIETY_EASE = SuggestionTemplate(
    S.STRESS_RELIEF, "Morning Anxiety Ease",
    "Start with 5 minutes of box breathing, followed by gentle affirmations.",
    "10 minutes", "Address morning anxiety with calming practices", base_relevance=0.9,
)
MORNING_POWER_HOUR = SuggestionTemplate(
    S.GROWTH, "Morning Power Hour",
    "Set your top 3 priorities for the day and visualize accomplishing them with ease.",
    "10 minutes", "Morning intention setting for productive days", base_relevance=0.6,
)
WORK_LIFE_BALANCE = SuggestionTemplate(
    S.STRESS_RELIEF, "Work-Life Balance Check",
    "Assess your work boundaries and plan one non-work activity that brings you joy.",
    "15 minutes", "Work themes detected in recent entries", base_relevance=0.8,
)

GENERIC_SUGGESTIONS: tuple[SuggestionTemplate, ...] = (
    SuggestionTemplate(
        S.REFLECTION, "Present Moment Awareness",
        "Simply sit and notice what you're experiencing right now without judgment.",
        "5-10 minutes", "Cultivate mindful presence", base_relevance=0.6,
    ),
    SuggestionTemplate(
        S.MOOD_BOOST, "Gratitude Moment",
        "Think of three things you're grateful for right now, however small.",
        "5 minutes", "Shift focus to positive aspects of life", base_relevance=0.7,
    ),
    SuggestionTemplate(
        S.STRESS_RELIEF, "Gentle Movement",
        "Do some light stretching or take a short walk to connect with your body.",
        "10-15 minutes", "Physical movement supports emotional well-being", base_relevance=0.6,
    ),
)

FIXED_TEMPLATES = (
    *DEFAULT_SUGGESTIONS,
    STRESS_RESET,
    POSITIVE_MOMENTUM,
    RELATIONSHIP_APPRECIATION,
    SUNDAY_SOUL_RESET,
    WEEKLY_WISDOM,
    MORNING_ANXIETY_EASE,
    MORNING_POWER_HOUR,
    WORK_LIFE_BALANCE,
    *GENERIC_SUGGESTIONS,
)


def validate_catalog(
    mood_suggestions: Mapping[MoodType, MoodSuggestionSet] = MOOD_SUGGESTIONS,
    fixed: tuple[SuggestionTemplate, ...] = FIXED_TEMPLATES,
) -> None:
    """Raise LexiconError if the tables are incomplete or malformed."""
    missing = [m.value for m in MoodType if m not in mood_suggestions]
    if missing:
        raise LexiconError(f"No suggestions for moods: {', '.join(missing)}")

    for mood, suggestion_set in mood_suggestions.items():
        if not suggestion_set.candidates:
            raise LexiconError(f"Empty suggestion set for {mood.value}")
        for theme, variant in suggestion_set.contextual_variants.items():
            if not isinstance(theme, Theme) or variant.theme != theme:
                raise LexiconError(f"{mood.value} variant {variant.title!r} has mismatched theme {theme!r}")

    if len(DEFAULT_SUGGESTIONS) != 3 or len(GENERIC_SUGGESTIONS) != 3:
        raise LexiconError("Default and generic tables must hold exactly 3 suggestions")

    for template in fixed:
        if not 0.0 <= template.base_relevance <= 1.0:
            raise LexiconError(f"{template.title!r} relevance out of range: {template.base_relevance}")


validate_catalog()
