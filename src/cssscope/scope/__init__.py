from cssscope.scope.extractor import find_blocks, process
from cssscope.scope.model import Rule, ScopeBlock
from cssscope.scope.reassembler import apply_prefix
from cssscope.scope.selector import parent_prefix, rewrite_selector
from cssscope.scope.tokenizer import tokenize

__all__ = [
    "Rule",
    "ScopeBlock",
    "apply_prefix",
    "find_blocks",
    "parent_prefix",
    "process",
    "rewrite_selector",
    "tokenize",
]
