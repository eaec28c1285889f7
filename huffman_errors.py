class HuffmanError(Exception):
    pass


class EncodeError(HuffmanError):
    def __init__(self, char, position):
        super().__init__(f"no code for {char!r} at position {position}")
        self.char = char
        self.position = position


class DecodeError(HuffmanError):
    def __init__(self, message, position):
        super().__init__(f"{message} (after bit {position})")
        self.position = position
