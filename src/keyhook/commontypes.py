class KeyhookError(Exception):
    pass


class InvalidKeyEvent(KeyhookError, ValueError):
    def __init__(self, kind: int, key_code: int, key_char: str):
        self.kind = kind
        self.key_code = key_code
        self.key_char = key_char
        super().__init__(f"Typed events need a character and no key code (kind={kind!r}, key_code={key_code:#x}, key_char={key_char!r})")


class TraceError(KeyhookError):
    def __init__(self, lineno: int, reason: str):
        self.lineno = lineno
        super().__init__(f"Bad trace record on line {lineno}: {reason}")
