"""Static mood patterns, sentiment lexicon and word sets used by the analyzer.

Every mood is described by the same ``MoodPattern`` shape. The tables are
bundled into an immutable ``Lexicon`` that is validated when this module is
imported, so a malformed table fails at startup rather than mid-analysis.
"""

from dataclasses import dataclass, field
from functools import cached_property
from types import MappingProxyType
from typing import Mapping, Optional

from shared_types import MoodType, SentimentPolarity


class LexiconError(ValueError):
    """Raised when lexicon or catalog tables are malformed."""


@dataclass(frozen=True)
class MoodPattern:
    keywords: tuple[str, ...]
    phrases: tuple[str, ...]
    contextual_boosts: tuple[str, ...]
    intensifiers: tuple[str, ...]
    weight: float
    sentiment_multiplier: float
    confidence: float


@dataclass(frozen=True)
class WeightedWords:
    """A named tier of words sharing one weight or multiplier."""

    name: str
    words: tuple[str, ...]
    weight: float

    def __contains__(self, word: str) -> bool:
        return word in self.words


# --- Mood patterns ---

_MOOD_PATTERNS = {
    MoodType.JOYFUL: MoodPattern(
        keywords=(
            # core joy
            "happy", "joy", "joyful", "elated", "ecstatic", "blissful", "euphoric", "delighted",
            "cheerful", "upbeat", "radiant", "glowing", "beaming", "bright", "sunny", "gleeful",
            "thrilled", "overjoyed", "exhilarated", "jubilant", "exuberant", "buoyant",
            # achievement
            "amazing", "wonderful", "fantastic", "incredible", "awesome", "brilliant", "perfect",
            "excellent", "outstanding", "marvelous", "spectacular", "magnificent", "superb",
            "triumphant", "victorious", "accomplished", "successful", "proud", "fulfilled",
            # connection
            "love", "adore", "cherish", "treasure", "blessed", "grateful", "thankful", "appreciate",
            "connected", "bonded", "united", "harmonious", "intimate", "affectionate",
            # vitality
            "energetic", "vibrant", "alive", "thriving", "flourishing", "glorious",
            "invigorated", "revitalized", "refreshed", "renewed", "spirited", "dynamic",
        ),
        phrases=(
            "feeling great", "so happy", "best day", "love this", "amazing time",
            "couldn't be happier", "over the moon", "on cloud nine", "heart is full",
            "bursting with joy", "life is good", "feeling blessed", "so grateful",
            "pure happiness", "absolutely wonderful", "perfect moment", "incredible feeling",
            "beyond happy", "filled with joy", "walking on air", "living my best life",
            "dreams come true", "everything clicked", "magical moment", "pure bliss",
            "heart singing",
        ),
        contextual_boosts=(
            "celebration", "achievement", "success", "milestone", "victory", "accomplishment",
            "breakthrough", "progress", "growth", "improvement", "wedding", "graduation",
            "promotion", "reunion", "surprise", "gift", "vacation", "adventure", "discovery",
            "recognition",
        ),
        intensifiers=("absolutely", "completely", "totally", "incredibly", "amazingly"),
        weight=0.98,
        sentiment_multiplier=1.5,
        confidence=0.95,
    ),
    MoodType.EXCITED: MoodPattern(
        keywords=(
            "excited", "thrilled", "pumped", "energetic", "enthusiastic", "eager", "anticipating",
            "exhilarated", "animated", "spirited", "dynamic", "charged", "electrified",
            "stimulated", "passionate", "fired up", "motivated", "inspired", "invigorated",
            "revved up", "buzzing", "hyped", "stoked", "amped", "psyched", "keyed up", "wound up",
        ),
        phrases=(
            "so excited", "can't wait", "really looking forward", "pumped up", "fired up",
            "bursting with energy", "raring to go", "full of anticipation",
            "buzzing with excitement", "absolutely thrilled", "beyond excited",
            "can hardly contain", "chomping at the bit", "on the edge of my seat",
            "heart racing", "adrenaline pumping", "electric feeling",
        ),
        contextual_boosts=(
            "opportunity", "adventure", "new", "beginning", "start", "launch", "debut",
            "journey", "exploration", "discovery", "travel", "vacation", "project",
            "challenge", "competition", "event", "performance", "presentation", "interview",
        ),
        intensifiers=("super", "really", "extremely", "incredibly", "wildly"),
        weight=0.92,
        sentiment_multiplier=1.3,
        confidence=0.88,
    ),
    MoodType.CONTENT: MoodPattern(
        keywords=(
            "content", "satisfied", "peaceful", "calm", "serene", "tranquil", "relaxed",
            "comfortable", "settled", "balanced", "stable", "steady", "grounded", "centered",
            "good", "fine", "okay", "pleasant", "nice", "decent", "solid", "fulfilled",
            "harmonious", "composed", "collected", "poised", "secure", "confident",
        ),
        phrases=(
            "feeling good", "pretty good", "going well", "not bad", "quite content",
            "at peace", "feeling settled", "in a good place", "things are good",
            "life is stable", "feeling balanced", "sense of peace", "comfortable with",
            "satisfied with", "everything in place", "smooth sailing", "steady progress",
            "quiet confidence",
        ),
        contextual_boosts=(
            "balance", "harmony", "stability", "routine", "consistency", "comfort", "home",
            "family", "relationship", "work-life balance", "meditation", "mindfulness",
            "acceptance", "gratitude", "simplicity", "order", "structure",
        ),
        intensifiers=("quite", "fairly", "reasonably", "genuinely", "truly"),
        weight=0.75,
        sentiment_multiplier=0.8,
        confidence=0.82,
    ),
    MoodType.PEACEFUL: MoodPattern(
        keywords=(
            "peaceful", "serene", "tranquil", "calm", "quiet", "still", "meditative", "zen",
            "centered", "balanced", "harmonious", "gentle", "soft", "soothing", "mindful",
            "restful", "placid", "undisturbed", "composed", "collected", "contemplative",
            "reflective", "introspective", "thoughtful", "wise", "enlightened", "spiritual",
        ),
        phrases=(
            "feeling peaceful", "so calm", "inner peace", "at peace", "deeply relaxed",
            "perfectly still", "sense of calm", "peaceful moment", "quiet mind",
            "centered feeling", "harmonious state", "tranquil space", "serene atmosphere",
            "mindful presence", "spiritual connection", "deep breathing", "meditation state",
            "flow state",
        ),
        contextual_boosts=(
            "meditation", "nature", "silence", "solitude", "reflection", "mindfulness",
            "breathing", "stillness", "garden", "beach", "mountains", "yoga",
            "prayer", "contemplation", "wisdom", "enlightenment", "spirituality", "zen",
        ),
        intensifiers=("deeply", "profoundly", "completely", "utterly", "perfectly"),
        weight=0.85,
        sentiment_multiplier=0.9,
        confidence=0.90,
    ),
    MoodType.NEUTRAL: MoodPattern(
        keywords=(
            "okay", "fine", "normal", "usual", "regular", "average", "typical", "ordinary",
            "standard", "routine", "everyday", "common", "unremarkable", "plain", "simple",
            "moderate", "middle", "balanced", "even", "steady", "consistent", "stable",
        ),
        phrases=(
            "nothing special", "same as usual", "pretty normal", "just okay", "status quo",
            "neither good nor bad", "middle ground", "business as usual", "typical day",
            "going through motions", "same old", "routine stuff", "nothing new",
        ),
        contextual_boosts=("routine", "ordinary", "regular", "typical", "standard", "normal"),
        intensifiers=("just", "simply", "merely", "only", "basically"),
        weight=0.5,
        sentiment_multiplier=0.0,
        confidence=0.70,
    ),
    MoodType.MELANCHOLY: MoodPattern(
        keywords=(
            "sad", "down", "blue", "melancholy", "gloomy", "somber", "wistful", "pensive",
            "reflective", "quiet", "subdued", "low", "heavy", "weary", "tired", "drained",
            "empty", "hollow", "lonely", "isolated", "disconnected", "distant", "withdrawn",
            "nostalgic", "longing", "yearning", "missing", "grieving", "mourning", "sorrowful",
            "melancholic", "dejected", "despondent", "forlorn", "heartbroken", "tearful",
        ),
        phrases=(
            "feeling down", "bit sad", "not great", "feeling blue", "heavy heart", "feeling low",
            "down in the dumps", "not myself", "feeling empty", "missing something",
            "sense of loss", "feeling distant", "emotionally drained", "heart aches",
            "deep sadness", "tears in my eyes", "weight on my chest", "soul feels heavy",
            "aching inside",
        ),
        contextual_boosts=(
            "loss", "goodbye", "ending", "change", "transition", "memory", "past", "death",
            "nostalgia", "separation", "distance", "breakup", "disappointment", "failure",
            "rejection", "abandonment", "betrayal", "regret", "remorse", "guilt",
        ),
        intensifiers=("deeply", "profoundly", "overwhelmingly", "utterly", "completely"),
        weight=0.25,
        sentiment_multiplier=-1.2,
        confidence=0.85,
    ),
    MoodType.ANXIOUS: MoodPattern(
        keywords=(
            "anxious", "worried", "nervous", "stressed", "overwhelmed", "tense", "uneasy",
            "concerned", "restless", "panic", "fear", "afraid", "scared", "terrified",
            "frightened", "apprehensive", "jittery", "on edge", "frantic", "frazzled",
            "agitated", "unsettled", "disturbed", "troubled", "bothered", "pressured",
            "paranoid", "hypervigilant", "catastrophizing", "spiraling", "racing thoughts",
            "sleepless", "insomnia",
        ),
        phrases=(
            "feeling anxious", "so worried", "stressed out", "can't relax", "on edge",
            "losing sleep", "freaking out", "losing it", "can't cope", "too much",
            "overwhelming", "spiraling", "panic mode", "worst case scenario",
            "can't stop thinking", "mind racing", "heart pounding", "sweating bullets",
            "stomach in knots", "shaking with fear", "paralyzed by fear", "drowning in worry",
            "consumed by anxiety", "terror gripping me",
        ),
        contextual_boosts=(
            "deadline", "pressure", "uncertainty", "unknown", "change", "decision", "exam",
            "future", "what if", "problem", "crisis", "emergency", "health", "money", "job",
            "performance", "judgment", "criticism", "failure", "rejection", "confrontation",
        ),
        intensifiers=("extremely", "incredibly", "overwhelmingly", "paralyzing", "crippling"),
        weight=0.15,
        sentiment_multiplier=-1.4,
        confidence=0.92,
    ),
    MoodType.FRUSTRATED: MoodPattern(
        keywords=(
            "frustrated", "angry", "annoyed", "irritated", "mad", "upset", "furious", "livid",
            "aggravated", "bothered", "infuriated", "enraged", "outraged", "incensed",
            "exasperated", "fed up", "sick of", "done with", "had enough", "pissed off",
            "impatient", "agitated", "riled up", "steamed", "ticked off", "irate",
            "seething", "boiling", "explosive", "volcanic", "burning with rage",
        ),
        phrases=(
            "so frustrated", "really angry", "fed up", "had enough", "losing patience",
            "at my limit", "driving me crazy", "can't stand", "makes me mad", "so annoying",
            "absolutely furious", "beyond frustrated", "ready to explode", "last straw",
            "boiling point", "seeing red", "blood boiling", "steam coming out",
            "about to lose it", "rage building up", "fury consuming me", "anger overwhelming",
            "explosive rage",
        ),
        contextual_boosts=(
            "obstacle", "barrier", "block", "stuck", "delay", "setback", "problem", "traffic",
            "issue", "conflict", "disagreement", "unfair", "injustice", "bureaucracy",
            "politics", "incompetence", "stupidity", "ignorance", "disrespect", "betrayal",
            "lies",
        ),
        intensifiers=("absolutely", "completely", "totally", "utterly", "beyond"),
        weight=0.08,
        sentiment_multiplier=-1.3,
        confidence=0.88,
    ),
}

# --- Sentiment lexicon (strongest tier first) ---

MAX_TERM_WORDS = 3

_POSITIVE_TIERS = (
    WeightedWords(
        "extreme",
        (
            "ecstatic", "euphoric", "blissful", "magnificent", "spectacular", "phenomenal",
            "extraordinary", "miraculous", "divine", "heavenly",
        ),
        3.0,
    ),
    WeightedWords(
        "strong",
        (
            "love", "amazing", "incredible", "fantastic", "wonderful", "brilliant", "perfect",
            "excellent", "outstanding", "marvelous", "superb", "thrilled", "elated",
            "overjoyed", "delighted", "blessed", "grateful",
        ),
        2.0,
    ),
    WeightedWords(
        "moderate",
        (
            "good", "nice", "great", "happy", "pleased", "satisfied", "content", "glad",
            "thankful", "appreciate", "enjoy", "like", "positive", "hopeful", "optimistic",
            "confident",
        ),
        1.0,
    ),
    WeightedWords(
        "mild",
        (
            "okay", "fine", "decent", "alright", "not bad", "pretty good", "fair", "pleasant",
            "comfortable", "acceptable",
        ),
        0.5,
    ),
)

_NEGATIVE_TIERS = (
    WeightedWords(
        "extreme",
        (
            "devastating", "catastrophic", "horrific", "nightmarish", "hellish", "unbearable",
            "excruciating", "agonizing", "torturous", "suicidal",
        ),
        -3.0,
    ),
    WeightedWords(
        "strong",
        (
            "hate", "terrible", "awful", "horrible", "worst", "crushing", "tragic",
            "heartbreaking", "furious", "enraged", "livid", "terrified", "panicked",
            "overwhelmed", "hopeless", "devastated",
        ),
        -2.0,
    ),
    WeightedWords(
        "moderate",
        (
            "bad", "sad", "upset", "angry", "worried", "stressed", "frustrated", "disappointed",
            "concerned", "troubled", "bothered", "annoyed", "difficult", "challenging",
            "unpleasant",
        ),
        -1.0,
    ),
    WeightedWords(
        "mild",
        (
            "not great", "not good", "bit down", "somewhat sad", "little worried",
            "mildly frustrated", "not ideal", "could be better", "disappointing", "concerning",
        ),
        -0.5,
    ),
)

# --- Contextual modifiers ---

_NEGATION_WORDS = (
    "not", "no", "never", "nothing", "nobody", "nowhere", "neither", "nor", "don't",
    "doesn't", "didn't", "won't", "wouldn't", "can't", "couldn't", "shouldn't", "isn't",
    "aren't", "wasn't", "weren't", "haven't", "hasn't",
)

_INTENSIFIER_TIERS = (
    WeightedWords(
        "extreme",
        (
            "absolutely", "completely", "totally", "utterly", "entirely", "thoroughly",
            "perfectly", "incredibly", "amazingly", "extraordinarily",
        ),
        2.0,
    ),
    WeightedWords(
        "strong",
        (
            "very", "extremely", "immensely", "tremendously", "exceptionally", "remarkably",
            "profoundly", "deeply",
        ),
        1.5,
    ),
    WeightedWords(
        "moderate", ("quite", "rather", "fairly", "pretty", "really", "truly", "genuinely"), 1.2
    ),
    WeightedWords(
        "mild", ("somewhat", "a bit", "a little", "kind of", "sort of", "slightly"), 0.8
    ),
)

_DIMINISHERS = WeightedWords(
    "diminisher",
    (
        "barely", "hardly", "scarcely", "rarely", "seldom", "occasionally", "sometimes",
        "maybe", "perhaps",
    ),
    0.5,
)

_TEMPORAL_TIERS = (
    WeightedWords("persistent", ("always", "constantly", "continuously", "forever", "eternally"), 1.3),
    WeightedWords("frequent", ("often", "frequently", "usually", "regularly", "commonly"), 1.1),
    WeightedWords("occasional", ("sometimes", "occasionally", "rarely", "seldom"), 0.8),
    WeightedWords("recent", ("lately", "recently", "now", "currently", "today"), 1.2),
)

_CONDITIONAL_WORDS = (
    "if", "when", "unless", "although", "though", "despite", "however", "but", "yet",
    "still", "nevertheless", "nonetheless",
)

_EMOTION_CUES = {
    "anxiety": (
        "heart racing", "sweating", "shaking", "trembling", "nausea", "dizzy", "breathless",
        "chest tight", "racing thoughts", "can't focus", "mind blank", "catastrophizing",
        "what if", "worst case", "avoiding", "procrastinating", "restless", "pacing",
        "fidgeting", "checking",
    ),
    "depression": (
        "tired", "exhausted", "heavy", "sluggish", "no energy", "sleeping too much",
        "can't sleep", "hopeless", "worthless", "guilty", "can't think", "memory problems",
        "indecisive", "isolating", "withdrawing", "not eating", "overeating", "no motivation",
        "giving up",
    ),
    "anger": (
        "hot", "burning", "tense", "clenched", "explosive", "pressure building", "unfair",
        "injustice", "betrayed", "disrespected", "violated", "revenge", "yelling", "slamming",
        "breaking", "confronting", "arguing", "fighting",
    ),
    "joy": (
        "light", "energetic", "warm", "glowing", "floating", "buzzing", "grateful", "blessed",
        "lucky", "optimistic", "hopeful", "confident", "laughing", "smiling", "dancing",
        "singing", "celebrating", "sharing",
    ),
}

# --- Keyword extraction word sets ---

_STOP_WORDS = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with", "by",
    "is", "was", "are", "were", "be", "been", "have", "has", "had", "do", "does", "did",
    "will", "would", "could", "should", "may", "might", "must", "can", "shall",
    "i", "you", "he", "she", "it", "we", "they", "me", "him", "her", "us", "them",
    "my", "your", "his", "its", "our", "their", "this", "that", "these", "those",
    "who", "what", "where", "when", "why", "how", "which", "whose", "whom",
    "if", "then", "else", "while", "until", "since", "because", "although", "though",
    "just", "only", "also", "even", "still", "yet", "already", "again", "once", "more",
    "some", "any", "all", "each", "every", "both", "either", "neither", "other", "another",
})

_EMOTIONAL_WORDS = frozenset({
    "love", "hate", "fear", "hope", "joy", "sadness", "anger", "peace", "anxiety",
    "excitement", "disappointment", "gratitude", "pride", "shame", "guilt", "relief",
    "surprise", "trust", "jealousy", "compassion", "empathy", "loneliness", "belonging",
    "vulnerability", "intimacy", "passion", "desire", "yearning", "contentment",
    "serenity", "bliss", "euphoria", "melancholy", "despair", "rage", "fury",
})

_CONTEXTUAL_WORDS = frozenset({
    "work", "job", "career", "school", "education", "health", "fitness", "exercise",
    "relationship", "marriage", "friendship", "family", "children", "parents",
    "money", "finance", "home", "travel", "vacation", "hobby", "creativity",
    "nature", "weather", "season", "holiday", "celebration", "achievement",
    "challenge", "problem", "solution", "decision", "choice", "opportunity",
    "responsibility", "commitment", "obligation", "freedom", "independence",
})

_PSYCHOLOGICAL_WORDS = frozenset({
    "therapy", "counseling", "meditation", "mindfulness", "awareness", "consciousness",
    "subconscious", "memory", "trauma", "healing", "recovery", "growth", "development",
    "personality", "character", "identity", "self-esteem", "confidence", "insecurity",
    "motivation", "inspiration", "determination", "willpower", "resilience", "strength",
    "weakness", "vulnerability", "courage", "bravery", "fear", "phobia", "anxiety",
})

_RELATIONSHIP_WORDS = frozenset({
    "partner", "spouse", "boyfriend", "girlfriend", "husband", "wife", "lover",
    "friend", "friendship", "companion", "colleague", "teammate", "neighbor",
    "family", "mother", "father", "parent", "child", "sibling", "brother", "sister",
    "connection", "bond", "relationship", "intimacy", "closeness", "distance",
    "communication", "conversation", "dialogue", "conflict", "argument", "disagreement",
    "support", "help", "care", "nurture", "protection", "loyalty", "trust", "betrayal",
})

_TEMPORAL_SIGNIFICANCE_WORDS = frozenset({
    "milestone", "anniversary", "birthday", "graduation", "wedding", "funeral",
    "beginning", "ending", "start", "finish", "transition", "change", "transformation",
    "breakthrough", "turning point", "crossroads", "deadline", "appointment",
    "meeting", "event", "occasion", "moment", "instant", "period", "phase", "stage",
})

_GROWTH_VOCABULARY = frozenset({
    "breakthrough", "transformation", "realization", "epiphany", "insight", "wisdom",
    "connection", "relationship", "family", "friend", "love", "support", "community",
    "achievement", "success", "failure", "challenge", "opportunity", "growth",
    "healing", "recovery", "progress", "setback", "milestone", "journey",
    "purpose", "meaning", "identity", "values", "beliefs", "spirituality",
    "creativity", "passion", "inspiration", "motivation", "determination",
})


def _all_words(tiers: tuple[WeightedWords, ...]) -> frozenset[str]:
    return frozenset(w for tier in tiers for w in tier.words)


@dataclass(frozen=True)
class Lexicon:
    """Immutable bundle of every table the analyzer reads."""

    moods: Mapping[MoodType, MoodPattern]
    positive_tiers: tuple[WeightedWords, ...]
    negative_tiers: tuple[WeightedWords, ...]
    negation_words: tuple[str, ...]
    intensifier_tiers: tuple[WeightedWords, ...]
    diminishers: WeightedWords
    temporal_tiers: tuple[WeightedWords, ...]
    conditional_words: tuple[str, ...]
    conditional_multiplier: float
    emotion_cues: Mapping[str, tuple[str, ...]]
    stop_words: frozenset[str]
    emotional_words: frozenset[str]
    contextual_words: frozenset[str]
    psychological_words: frozenset[str]
    relationship_words: frozenset[str]
    temporal_significance_words: frozenset[str]
    growth_vocabulary: frozenset[str]
    _weights: dict = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self):
        # Later tiers overwrite earlier ones, so negative entries win on overlap.
        weights = {}
        for tier in self.positive_tiers + self.negative_tiers:
            for word in tier.words:
                weights[word] = tier.weight
        self._weights.update(weights)

    def pattern(self, mood: MoodType) -> MoodPattern:
        return self.moods[mood]

    @cached_property
    def positive_words(self) -> frozenset[str]:
        return _all_words(self.positive_tiers)

    @cached_property
    def negative_words(self) -> frozenset[str]:
        return _all_words(self.negative_tiers)

    @cached_property
    def high_value_words(self) -> frozenset[str]:
        return self.positive_words | self.negative_words | self.growth_vocabulary

    def sentiment_weight(self, term: str) -> Optional[float]:
        """Lexicon weight for a word or multi-word term, None if not a sentiment term."""
        return self._weights.get(term)

    def sentiment_words(self, polarity: SentimentPolarity) -> frozenset[str]:
        if polarity == SentimentPolarity.POSITIVE:
            return self.positive_words
        if polarity == SentimentPolarity.NEGATIVE:
            return self.negative_words
        return frozenset()

    def intensifier_multiplier(self, previous: str) -> Optional[float]:
        for tier in self.intensifier_tiers:
            if previous in tier:
                return tier.weight
        return None

    def validate(self) -> "Lexicon":
        """Check table shape and value ranges.

        Raises:
            LexiconError: on a missing mood, a bad prior, a malformed term or a
                sentiment tier carrying the wrong sign.
        """
        missing = set(MoodType) - set(self.moods)
        if missing:
            raise LexiconError(f"Lexicon missing moods: {sorted(missing)}")

        for mood, pattern in self.moods.items():
            if pattern.weight <= 0:
                raise LexiconError(f"{mood}: weight must be positive, got {pattern.weight}")
            if not 0.0 <= pattern.confidence <= 1.0:
                raise LexiconError(f"{mood}: confidence must be 0-1, got {pattern.confidence}")
            if not pattern.keywords:
                raise LexiconError(f"{mood}: no keywords")
            for term in pattern.keywords + pattern.phrases + pattern.contextual_boosts:
                _check_term(term, str(mood))

        for tier in self.positive_tiers:
            if tier.weight <= 0:
                raise LexiconError(f"Positive tier '{tier.name}' has non-positive weight")
        for tier in self.negative_tiers:
            if tier.weight >= 0:
                raise LexiconError(f"Negative tier '{tier.name}' has non-negative weight")
        for tier in self.positive_tiers + self.negative_tiers:
            for term in tier.words:
                _check_term(term, f"sentiment tier '{tier.name}'")
                if len(term.split()) > MAX_TERM_WORDS:
                    raise LexiconError(f"Sentiment term longer than {MAX_TERM_WORDS} words: '{term}'")

        if not 0 < self.conditional_multiplier <= 1:
            raise LexiconError("conditional_multiplier must be in (0, 1]")
        return self


def _check_term(term: str, owner: str) -> None:
    if not term or term != term.strip().lower():
        raise LexiconError(f"{owner}: term must be non-empty lower-case, got {term!r}")


DEFAULT_LEXICON = Lexicon(
    moods=MappingProxyType(_MOOD_PATTERNS),
    positive_tiers=_POSITIVE_TIERS,
    negative_tiers=_NEGATIVE_TIERS,
    negation_words=_NEGATION_WORDS,
    intensifier_tiers=_INTENSIFIER_TIERS,
    diminishers=_DIMINISHERS,
    temporal_tiers=_TEMPORAL_TIERS,
    conditional_words=_CONDITIONAL_WORDS,
    conditional_multiplier=0.7,
    emotion_cues=MappingProxyType(_EMOTION_CUES),
    stop_words=_STOP_WORDS,
    emotional_words=_EMOTIONAL_WORDS,
    contextual_words=_CONTEXTUAL_WORDS,
    psychological_words=_PSYCHOLOGICAL_WORDS,
    relationship_words=_RELATIONSHIP_WORDS,
    temporal_significance_words=_TEMPORAL_SIGNIFICANCE_WORDS,
    growth_vocabulary=_GROWTH_VOCABULARY,
).validate()
