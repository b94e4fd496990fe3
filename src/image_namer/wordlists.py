"""Curated word lists for the built-in themes.

Each theme contributes one adjective list and one noun list. The universal
lists combine every theme, deduplicated in first-seen order.
"""

ARTISTIC_ADJECTIVES = [
    "soft", "gentle", "delicate", "elegant", "graceful", "refined", "subtle", "muted",
    "vibrant", "vivid", "bold", "striking", "dramatic", "expressive", "poetic", "lyrical",
    "serene", "tranquil", "ethereal", "dreamy", "mystical", "whimsical", "romantic", "luminous",
    "radiant", "velvety", "silken", "glossy", "atmospheric", "moody", "textured", "chromatic",
]

ARTISTIC_NOUNS = [
    "moonlight", "sunset", "dawn", "twilight", "breeze", "whisper", "silence", "harmony",
    "dream", "vision", "reverie", "muse", "canvas", "palette", "brushstroke", "masterpiece",
    "melody", "symphony", "rhythm", "verse", "poem", "shadow", "glow", "sparkle",
    "portrait", "landscape", "sculpture", "texture", "pattern", "motif", "gallery", "studio",
]

NATURE_ADJECTIVES = [
    "wild", "natural", "organic", "pristine", "untamed", "rugged", "majestic", "ancient",
    "timeless", "evergreen", "fresh", "lush", "fertile", "blooming", "crisp", "cool",
    "verdant", "emerald", "leafy", "sunlit", "golden", "misty", "foggy", "flowing",
    "cascading", "mossy", "rocky", "sandy", "coastal", "breezy", "snowy", "frosty",
]

NATURE_NOUNS = [
    "mountain", "valley", "peak", "ridge", "summit", "cliff", "canyon", "forest",
    "grove", "meadow", "prairie", "river", "stream", "brook", "waterfall", "ocean",
    "lake", "pond", "harbor", "cove", "shore", "oak", "pine", "cedar",
    "willow", "fern", "blossom", "petal", "pebble", "boulder", "glacier", "tide",
]

URBAN_ADJECTIVES = [
    "modern", "sleek", "metropolitan", "urban", "industrial", "concrete", "steel", "glass",
    "neon", "electric", "buzzing", "bustling", "busy", "vertical", "towering", "angular",
    "geometric", "minimal", "gritty", "rustic", "vintage", "retro", "bright", "nocturnal",
    "midnight", "cosmopolitan", "eclectic", "layered", "reflective", "polished", "weathered", "tiled",
]

URBAN_NOUNS = [
    "skyline", "skyscraper", "tower", "bridge", "avenue", "boulevard", "street", "alley",
    "plaza", "square", "rooftop", "terrace", "loft", "warehouse", "station", "platform",
    "subway", "tram", "taxi", "crosswalk", "mural", "graffiti", "billboard", "lamppost",
    "cafe", "market", "arcade", "balcony", "staircase", "fountain", "harbor", "district",
]

ADVENTURE_ADJECTIVES = [
    "bold", "brave", "courageous", "daring", "fearless", "intrepid", "adventurous", "thrilling",
    "epic", "grand", "heroic", "legendary", "mythical", "rugged", "resilient", "unstoppable",
    "mighty", "perilous", "remote", "isolated", "distant", "uncharted", "unexplored", "hidden",
    "exotic", "extreme", "spectacular", "breathtaking", "pioneering", "endless", "boundless", "memorable",
]

ADVENTURE_NOUNS = [
    "journey", "quest", "expedition", "voyage", "odyssey", "trek", "explorer", "pioneer",
    "pathfinder", "scout", "ranger", "frontier", "wilderness", "vista", "treasure", "relic",
    "compass", "map", "lantern", "torch", "campfire", "ember", "summit", "cavern",
    "grotto", "tunnel", "oasis", "dune", "mirage", "rapids", "legend", "trail",
]

SCIENTIFIC_ADJECTIVES = [
    "precise", "accurate", "systematic", "methodical", "analytical", "empirical", "quantitative", "experimental",
    "theoretical", "rigorous", "meticulous", "sophisticated", "advanced", "innovative", "novel", "logical",
    "atomic", "molecular", "cellular", "microscopic", "quantum", "nuclear", "crystalline", "synthetic",
    "biological", "elemental", "fundamental", "composite", "hybrid", "stable", "volatile", "optimized",
]

SCIENTIFIC_NOUNS = [
    "hypothesis", "theory", "principle", "theorem", "formula", "equation", "algorithm", "experiment",
    "observation", "analysis", "discovery", "breakthrough", "laboratory", "observatory", "specimen", "sample",
    "molecule", "atom", "particle", "electron", "proton", "photon", "catalyst", "enzyme",
    "compound", "spectrum", "wavelength", "frequency", "vector", "tensor", "matrix", "lattice",
]


def _combine(*wordlists: list[str]) -> list[str]:
    return list(dict.fromkeys(word for wordlist in wordlists for word in wordlist))


UNIVERSAL_ADJECTIVES = _combine(
    ARTISTIC_ADJECTIVES, NATURE_ADJECTIVES, URBAN_ADJECTIVES, ADVENTURE_ADJECTIVES, SCIENTIFIC_ADJECTIVES
)

UNIVERSAL_NOUNS = _combine(
    ARTISTIC_NOUNS, NATURE_NOUNS, URBAN_NOUNS, ADVENTURE_NOUNS, SCIENTIFIC_NOUNS
)

THEME_WORDLISTS: dict[str, tuple[list[str], list[str]]] = {
    "artistic": (ARTISTIC_ADJECTIVES, ARTISTIC_NOUNS),
    "nature": (NATURE_ADJECTIVES, NATURE_NOUNS),
    "urban": (URBAN_ADJECTIVES, URBAN_NOUNS),
    "adventure": (ADVENTURE_ADJECTIVES, ADVENTURE_NOUNS),
    "scientific": (SCIENTIFIC_ADJECTIVES, SCIENTIFIC_NOUNS),
    "universal": (UNIVERSAL_ADJECTIVES, UNIVERSAL_NOUNS),
}
