"""Interactive palindrome checker using a stack and a queue."""

from __future__ import annotations

import argparse
import sys

from dsakit.arrayqueue import ArrayQueue
from dsakit.stack import Stack

MAX_STR_LEN = 256
PROMPT = (
    "\nEnter a string, and we'll check whether it's a palindrome "
    "(ctrl-d to quit):\n"
)


def _letters(text: str):
    for char in text:
        if char.isascii() and char.isalpha():
            yield char.lower()


def is_palindrome(text: str) -> bool:
    """Return True if the letters of text read the same both ways, ignoring case."""
    stack = Stack()
    queue = ArrayQueue()
    for letter in _letters(text):
        stack.push(letter)
        queue.enqueue(letter)
    while not stack.is_empty() and not queue.is_empty():
        if stack.pop() != queue.dequeue():
            return False
    return True


def describe(text: str) -> str:
    """Return the verdict line printed for text."""
    if is_palindrome(text):
        return f'The string "{text}" is a palindrome.'
    return f'The string "{text}" is not a palindrome.'


def _strip_line_ending(line: str) -> str:
    for position, char in enumerate(line):
        if char in "\r\n":
            return line[:position]
    return line


def main(argv: list[str] | None = None) -> int:
    """Read strings from standard input until end of file and judge each one."""
    parser = argparse.ArgumentParser(
        prog="palindrome",
        description="Check whether lines typed on standard input are palindromes.",
    )
    parser.parse_args(argv)

    while True:
        sys.stdout.write(PROMPT)
        sys.stdout.flush()
        line = sys.stdin.readline(MAX_STR_LEN - 1)
        if not line:
            break
        print(describe(_strip_line_ending(line)))
    return 0


if __name__ == "__main__":
    sys.exit(main())