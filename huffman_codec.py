import logging

from huffman_core import HuffmanLogic
from huffman_errors import DecodeError, EncodeError

logger = logging.getLogger(__name__)


class HuffmanCodec:
    # strict=True raises EncodeError/DecodeError instead of skipping
    def __init__(self, source_text, strict=False):
        self.logic = HuffmanLogic()
        self.strict = strict
        self._freqs = self.logic.analyze_text(source_text)
        self._tree = self.logic.build_tree(self._freqs)
        self._codes = self.logic.generate_codes(self._tree)
        logger.debug("code table has %d entries", len(self._codes))

    @property
    def frequencies(self):
        return dict(self._freqs)

    @property
    def tree(self):
        return self._tree

    @property
    def codes(self):
        return dict(self._codes)

    def encode(self, text):
        if not text:
            return ""

        # A one-node tree has the empty code; spend one bit per symbol instead
        single = self._tree is not None and self._tree.is_leaf()

        out = []
        for i, char in enumerate(text):
            code = self._codes.get(char)
            if code is None:
                if self.strict:
                    raise EncodeError(char, i)
                continue
            out.append("0" if single else code)
        return "".join(out)

    def decode(self, bits):
        root = self._tree
        if root is None:
            if self.strict and bits:
                raise DecodeError("codec has no code table", 0)
            return ""

        out = []
        current = root
        last_symbol_end = 0
        for i, bit in enumerate(bits):
            if current.is_leaf():
                out.append(current.char)
                current = root
                last_symbol_end = i + 1
                continue

            current = current.left if bit == "0" else current.right

            if current.is_leaf():
                out.append(current.char)
                current = root
                last_symbol_end = i + 1

        if last_symbol_end < len(bits):
            if self.strict:
                raise DecodeError("bit string ends inside a code", last_symbol_end)
            logger.debug("dropping %d trailing bits", len(bits) - last_symbol_end)
        return "".join(out)
