class Scan:
    """
    A simple scanner over a single command-line token.
    """

    _src: str
    _off: int
    _save: list[int]

    def __init__(self, src: str, off: int = 0):
        """
        Initializes a new `Scan` object.

        Args:
            src: The token to scan.
            off: The starting offset within the token.
        """
        self._src = src
        self._off = off
        self._save = []

    def curr(self) -> str:
        """
        Returns the current character being scanned.

        Returns:
            The current character, or '\0' if at the end of the token.
        """
        if self.eof():
            return "\0"
        return self._src[self._off]

    def next(self) -> str:
        """
        Advances the scanner to the next character.

        Returns:
            The new current character, or '\0' if at the end of the token.
        """
        if self.eof():
            return "\0"

        self._off += 1
        return self.curr()

    def eof(self) -> bool:
        """
        Checks if the scanner is at the end of the token.
        """
        return self._off >= len(self._src)

    def skipStr(self, s: str) -> bool:
        """
        Attempts to skip over the given string.

        Returns:
            True if the string was skipped, False otherwise.
        """
        if self._src[self._off :].startswith(s):
            self._off += len(s)
            return True

        return False

    def save(self) -> None:
        """Saves the current scanner position."""
        self._save.append(self._off)

    def restore(self) -> None:
        """Restores the scanner position to the last saved position."""
        self._off = self._save.pop()

    def until(self, c: str) -> str:
        """
        Consumes characters up to, but not including, the first occurrence of `c`.

        Returns:
            The consumed characters, or the rest of the token if `c` never occurs.
        """
        res = ""
        while not self.eof() and self.curr() != c:
            res += self.curr()
            self.next()
        return res

    def rest(self) -> str:
        """
        Consumes and returns everything left in the token.
        """
        res = self._src[self._off :]
        self._off = len(self._src)
        return res
