"""
Graph Assembly Constants

Constants, lookup tables and message templates used throughout the graph
assembly layer.

Author: Theodore Mui
Date: 2025-09-02
"""

from typing import Dict, FrozenSet

# Penn Treebank punctuation words
PUNCTUATION_WORDS: FrozenSet[str] = frozenset(
    {
        "''", "'", "``", "`", "-LRB-", "-RRB-", "-LCB-", "-RCB-", "-LSB-", "-RSB-",
        ".", "?", "!", ",", ":", "-", "--", "...", ";", "\"", "(", ")", "[", "]",
        "{", "}",
    }
)

# Accepted spellings of each extraction mode
MODE_ALIASES: Dict[str, str] = {
    "basic": "basic",
    "uncollapsed": "basic",
    "collapsed": "collapsed",
    "collapsed-tree": "collapsed-tree",
    "collapsedtree": "collapsed-tree",
    "cc-processed": "cc-processed",
    "ccprocessed": "cc-processed",
}

# Default Values
DEFAULTS = {
    "extraction_mode": "collapsed",
    "include_extras": False,
    "include_punctuation": False,
    "thread_safe": False,
    "normalize_sentence_index": False,
    "merged_sentence_index": 0,
}

# Error Messages
ERROR_MESSAGES = {
    "unknown_mode": "Unknown extraction mode: {mode!r}",
    "missing_analyzer_factory": "A constituent tree was given but no analyzer factory is configured",
    "length_mismatch": "Got {graphs} graphs but {lengths} sentence lengths",
    "negative_length": "Sentence length must be >= 0, got {length}",
    "unresolved_endpoint": "Counting problem (or broken edge): no cloned token at merged position {position}",
    "position_collision": "Merged position {position} was already issued by an earlier graph",
    "key_collision": "Cloned key {key} was produced by more than one vertex",
    "unresolved_key": "Broken edge: no cloned token with key {key}",
    "no_roots": "Graph has no roots",
}
