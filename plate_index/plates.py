import collections
import itertools as it
import logging
import string
import typing

from .exceptions import InvalidArgument, InvalidPlate, OutOfRange

logger = logging.getLogger(__name__)

# Plates are grouped into blocks by the number of trailing letters
#  ###### (0 letters, numbers only)
#  #####L (1 letter)
#  ...
#  LLLLLL (6 letters)
# Inside a block the numbers cycle fastest, so a block offset splits into
# letters_index * len(digits) ** numbers_count + numbers_index

DIGITS = string.digits
LETTERS = string.ascii_uppercase
PLATE_LENGTH = 6


class PlateFactory:
    """
    Responsible for mapping positions in the plate sequence to plates and back.
    Each segment is treated as a fixed-length, zero-padded number written in its
    own alphabet, so the nth plate can be computed without walking the sequence.
    """

    def __init__(self, digits: str = DIGITS, letters: str = LETTERS, length: int = PLATE_LENGTH):
        if isinstance(length, bool) or not isinstance(length, int) or length < 1:
            raise InvalidArgument(f"Plate length must be a positive integer: {length!r}")

        for name, alphabet in (('digits', digits), ('letters', letters)):
            if not alphabet:
                raise InvalidArgument(f"Alphabet of {name} must not be empty")
            if len(set(alphabet)) != len(alphabet):
                raise InvalidArgument(f"Alphabet of {name} has repeated symbols: {alphabet!r}")

        if set(digits) & set(letters):
            raise InvalidArgument("Alphabets of digits and letters must not share symbols")

        self.digits = digits
        self.letters = letters
        self.length = length

        self.reverse_digits = {char: i for i, char in enumerate(digits)}
        self.reverse_letters = {char: i for i, char in enumerate(letters)}

        # Index is the amount of letters in the plate
        self.block_sizes: typing.Tuple[int, ...] = tuple(
            len(digits) ** (length - letters_count) * len(letters) ** letters_count
            for letters_count in range(length + 1)
        )

        # Start index of each block, plus the total as the last entry
        *starts, self.total = it.accumulate(self.block_sizes, initial=0)
        self.block_starts: typing.Tuple[int, ...] = tuple(starts)

        logger.debug(
            "Plate blocks for length %d: sizes=%r total=%d",
            length, self.block_sizes, self.total,
        )

    def __repr__(self):
        return f'{type(self).__name__}(digits={self.digits!r}, letters={self.letters!r}, length={self.length!r})'

    def __eq__(self, other):
        if not isinstance(other, PlateFactory):
            return NotImplemented
        return (self.digits, self.letters, self.length) == (other.digits, other.letters, other.length)

    def __hash__(self):
        return hash((self.digits, self.letters, self.length))

    @staticmethod
    def _to_symbols(value: int, alphabet: str, width: int) -> str:
        d: typing.Deque[str] = collections.deque()

        appendleft = d.appendleft
        base = len(alphabet)

        for _ in range(width):
            value, rem = divmod(value, base)
            appendleft(alphabet[rem])

        return ''.join(d)

    @staticmethod
    def _from_symbols(chars: str, reverse: typing.Dict[str, int]) -> int:
        total = 0
        base = len(reverse)

        for digit in map(reverse.__getitem__, chars):
            total = total * base + digit

        return total

    def letters_count(self, n: int) -> int:
        if isinstance(n, bool) or not isinstance(n, int):
            raise InvalidArgument(f"Index must be an integer: {n!r}")
        if n < 0:
            raise InvalidArgument(f"Index must be non-negative: {n!r}")

        remainder = n

        for letters_count, block_size in enumerate(self.block_sizes):
            if remainder < block_size:
                return letters_count
            remainder -= block_size

        raise OutOfRange(f"Index {n!r} is out of range, the last plate is at {self.total - 1}")

    # encode/decode are the heart of this class
    def encode(self, n: int) -> str:
        letters_count = self.letters_count(n)
        numbers_count = self.length - letters_count

        offset = n - self.block_starts[letters_count]
        letters_index, numbers_index = divmod(offset, len(self.digits) ** numbers_count)

        return (
            self._to_symbols(numbers_index, self.digits, numbers_count)
            + self._to_symbols(letters_index, self.letters, letters_count)
        )

    def split(self, plate: str) -> typing.Tuple[str, str]:
        if not isinstance(plate, str) or len(plate) != self.length:
            raise InvalidPlate(f"Plate must be a string of {self.length} characters: {plate!r}")

        numbers_count = next(
            (i for i, char in enumerate(plate) if char not in self.reverse_digits),
            self.length,
        )
        numbers, letters = plate[:numbers_count], plate[numbers_count:]

        if not all(char in self.reverse_letters for char in letters):
            raise InvalidPlate(f"Plate must be digits followed by letters: {plate!r}")

        return numbers, letters

    def decode(self, plate: str) -> int:
        numbers, letters = self.split(plate)

        letters_index = self._from_symbols(letters, self.reverse_letters)
        numbers_index = self._from_symbols(numbers, self.reverse_digits)

        return (
            self.block_starts[len(letters)]
            + letters_index * len(self.digits) ** len(numbers)
            + numbers_index
        )

    def is_valid(self, plate: str) -> bool:
        try:
            self.split(plate)
        except InvalidPlate:
            return False
        return True


default_factory = PlateFactory()


def get_nth_plate(n: int) -> str:
    """Return the plate at position ``n`` of the six character sequence."""
    return default_factory.encode(n)


def plate_index(plate: str) -> int:
    """Return the position of ``plate`` in the six character sequence."""
    return default_factory.decode(plate)
