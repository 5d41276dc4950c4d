# token_queue.py
"""FIFO of (Token, text) pairs with two tokens of lookahead."""

from collections import deque
from typing import Deque, Iterator, Tuple

from .error_reporter import panic
from .nupy_token import NO_TOKEN, Token

TokenPair = Tuple[Token, str]

_NO_PAIR: TokenPair = (NO_TOKEN, "")


class TokenQueue:
    def __init__(self, pairs=()):
        self._items: Deque[TokenPair] = deque(pairs)

    def __len__(self):
        return len(self._items)

    def __iter__(self) -> Iterator[TokenPair]:
        return iter(self._items)

    def __repr__(self):
        return f"TokenQueue({len(self._items)} tokens)"

    def enqueue(self, token: Token, text: str):
        if token is None or text is None:
            panic("token or text is None (TokenQueue.enqueue)")
        self._items.append((token, text))

    def dequeue(self) -> TokenPair:
        if not self._items:
            panic("queue is empty (TokenQueue.dequeue)")
        return self._items.popleft()

    def peek_first(self) -> TokenPair:
        if not self._items:
            return _NO_PAIR
        return self._items[0]

    def peek_second(self) -> TokenPair:
        if len(self._items) < 2:
            return _NO_PAIR
        return self._items[1]

    def peek_token(self) -> Token:
        return self.peek_first()[0]

    def peek_value(self) -> str:
        return self.peek_first()[1]

    def duplicate(self) -> "TokenQueue":
        # Tokens and strings are immutable, so copying the pairs is enough.
        return TokenQueue(self._items)

    def destroy(self):
        self._items.clear()

    def tokens(self):
        return [token for token, _ in self._items]

    def texts(self):
        return [text for _, text in self._items]
