import logging
import re
from collections import Counter

from priority_queue import PriorityQueue

logger = logging.getLogger(__name__)

# Everything outside letters, comma and space is dropped before counting
DISALLOWED_CHARS = re.compile(r"[^a-zA-Z, ]")

INTERNAL_CHAR = "/"


class HuffmanNode:
    def __init__(self, char, freq, left=None, right=None):
        self.char = char
        self.freq = freq
        self.left = left
        self.right = right

    def is_leaf(self):
        return self.left is None

    # Higher frequency ranks higher in the priority queue
    def __gt__(self, other):
        if other is None:
            return True
        return self.freq > other.freq

    def __lt__(self, other):
        if other is None:
            return False
        return self.freq < other.freq

    def __repr__(self):
        if self.is_leaf():
            return f"HuffmanNode({self.char!r}, {self.freq})"
        return f"HuffmanNode(<internal>, {self.freq})"


class HuffmanLogic:
    def filter_text(self, text):
        return DISALLOWED_CHARS.sub("", text)

    def analyze_text(self, text):
        # Frequency analysis of the filtered text
        return dict(Counter(self.filter_text(text)))

    def build_tree(self, freqs):
        # Build a bounded priority queue of leaf nodes
        priority_queue = PriorityQueue(len(freqs))
        for char, freq in freqs.items():
            priority_queue.add(HuffmanNode(char, freq))

        if priority_queue.empty():
            return None
        if priority_queue.size() == 1:
            return priority_queue.front()

        # Repeatedly merge the two highest ranked nodes
        while priority_queue.size() > 1:
            left = priority_queue.front()
            priority_queue.remove()
            right = priority_queue.front()
            priority_queue.remove()
            merged = HuffmanNode(INTERNAL_CHAR, left.freq + right.freq, left, right)
            priority_queue.add(merged)

        root = priority_queue.front()
        logger.debug("built tree over %d symbols, total weight %d", len(freqs), root.freq)
        return root

    def generate_codes(self, node):
        codes = {}
        if node is None:
            return codes

        def walk(node, current_code):
            if node.left is not None and node.right is not None:
                walk(node.left, current_code + "0")
                walk(node.right, current_code + "1")
            else:
                codes[node.char] = current_code

        walk(node, "")
        return codes
