"""
Static word lists used by the feature extractor.

Everything here is built once at import time and exposed through immutable
containers.
"""

from __future__ import annotations

import math
from types import MappingProxyType
from typing import Mapping, Tuple

# Common English words ordered from most to least frequent. Position in the
# tuple is the word's rank; the list mixes function words with the formal
# connectives that dominate template-like prose.
COMMON_WORDS: Tuple[str, ...] = (
    "the", "of", "and", "to", "a", "in", "is", "that", "for", "it",
    "as", "was", "with", "be", "by", "on", "not", "he", "i", "this",
    "are", "or", "his", "from", "at", "which", "but", "have", "an", "had",
    "they", "you", "were", "their", "one", "all", "we", "can", "her", "has",
    "there", "been", "if", "more", "when", "will", "would", "who", "so", "no",
    "she", "other", "its", "may", "these", "what", "them", "than", "some", "him",
    "time", "into", "only", "do", "could", "new", "about", "two", "first", "then",
    "also", "any", "my", "our", "like", "over", "such", "many", "most", "through",
    "how", "should", "after", "where", "well", "even", "those", "because", "each", "made",
    "same", "while", "between", "both", "very", "used", "us", "make", "way", "being",
    "own", "just", "much", "your", "without", "however", "within", "several", "often", "various",
    "important", "different", "example", "number", "part", "system", "process", "world", "people", "use",
    "provide", "provides", "including", "include", "ensure", "allows", "enable", "enables", "help", "helps",
    "significant", "key", "overall", "further", "additionally", "furthermore", "moreover", "therefore", "thus", "hence",
    "consequently", "ultimately", "essentially", "particularly", "specifically", "notably", "indeed", "crucial", "essential", "vital",
    "numerous", "comprehensive", "effective", "efficient", "potential", "approach", "aspects", "landscape", "realm", "role",
    "paramount", "delve", "leverage", "utilize", "facilitate", "enhance", "foster", "robust", "seamless", "innovative",
)

# Weight assigned to any word missing from COMMON_WORDS.
RARE_WORD_WEIGHT = 1.0
# Rank at which a tabled word would be considered as surprising as an unseen one.
REFERENCE_RANK = 1000


def _build_rarity_table(words: Tuple[str, ...]) -> Mapping[str, float]:
    table: dict[str, float] = {}
    denominator = math.log(1 + REFERENCE_RANK)
    for rank, word in enumerate(words, start=1):
        table[word] = math.log(1 + rank) / denominator
    return MappingProxyType(table)


WORD_RARITY: Mapping[str, float] = _build_rarity_table(COMMON_WORDS)


def rarity_weight(word: str) -> float:
    """Rarity of a lower-cased word in [0, 1]; unlisted words are maximally rare."""
    return WORD_RARITY.get(word, RARE_WORD_WEIGHT)


# Formal discourse connectives, stored as lower-cased word tuples so they can be
# matched against tokenized sentences.
TRANSITION_PHRASES: Tuple[Tuple[str, ...], ...] = tuple(
    tuple(phrase.split())
    for phrase in (
        "furthermore",
        "moreover",
        "additionally",
        "consequently",
        "therefore",
        "thus",
        "hence",
        "nevertheless",
        "nonetheless",
        "accordingly",
        "subsequently",
        "ultimately",
        "notably",
        "importantly",
        "in addition",
        "in conclusion",
        "in summary",
        "to summarize",
        "in contrast",
        "as a result",
        "on the other hand",
        "for instance",
        "for example",
        "in particular",
        "in other words",
        "it is worth noting",
        "it's worth noting",
        "it is important to note",
        "it's important to note",
        "that being said",
        "with that in mind",
        "in today's",
        "first and foremost",
        "last but not least",
        "overall",
    )
)
MAX_TRANSITION_LENGTH = max(len(phrase) for phrase in TRANSITION_PHRASES)
TRANSITION_SET = frozenset(TRANSITION_PHRASES)

BE_AUXILIARIES = frozenset(
    {
        "am",
        "is",
        "are",
        "was",
        "were",
        "be",
        "been",
        "being",
        "isn't",
        "aren't",
        "wasn't",
        "weren't",
    }
)

# Words allowed between the auxiliary and the participle ("is being built",
# "was not often seen").
PASSIVE_INTERVENERS = frozenset(
    {"not", "being", "been", "also", "often", "always", "never", "then", "now", "still"}
)

# Past participles that do not end in "-ed".
IRREGULAR_PARTICIPLES = frozenset(
    {
        "begun", "bitten", "blown", "born", "bought", "broken", "brought",
        "built", "caught", "chosen", "done", "drawn", "driven", "eaten", "fallen",
        "felt", "found", "forgotten", "forgiven", "given", "gone", "grown", "heard",
        "held", "hidden", "kept", "known", "laid", "led", "left", "lost", "made",
        "meant", "met", "paid", "put", "read", "run", "said", "seen", "sent", "set",
        "shown", "sold", "spent", "spoken", "stolen", "taken", "taught", "thought",
        "told", "understood", "won", "worn", "written",
    }
)

# "-ed" words that usually act as adjectives after "be" rather than participles.
NON_PARTICIPLE_ED = frozenset({"need", "bed", "red", "shed", "seed", "speed", "feed", "indeed"})
