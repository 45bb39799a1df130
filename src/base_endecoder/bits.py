"""
Regrouping of a bit stream from one value width to another

A BitPacker takes values of any width (e.g. 8 bit bytes) and hands back
values of a fixed output width (e.g. 5 bit base32 symbols), keeping the bits
in the order they were consumed, most significant bit first.
"""

from typing import Iterable, Iterator, List, Optional


class BitPacker:
    """
    Accumulates consumed bits and emits them in groups of ``width`` bits

    Pending bits are kept as an integer together with their count. The count
    is always lower than ``width`` once ``consume`` returns.
    """

    MAX_WIDTH = 32

    def __init__(self, width: int):
        if not 1 <= width <= self.MAX_WIDTH:
            raise ValueError(f"Output width must be between 1 and {self.MAX_WIDTH}, got {width}")
        self.width = width
        self._pending = 0
        self._pending_count = 0

    @property
    def pending_bits(self) -> int:
        """Number of consumed bits not yet emitted"""
        return self._pending_count

    def consume(self, value: int, input_width: int) -> List[int]:
        """
        Append the lowest ``input_width`` bits of ``value`` to the stream

        Args:
            value: Unsigned integer which must fit in ``input_width`` bits
            input_width: Number of bits to take from ``value``

        Returns:
            The output values completed by these bits, in stream order
            (possibly none)

        Raises:
            ValueError: If the width is not positive or the value does not fit
        """
        if input_width < 1:
            raise ValueError(f"Input width must be positive, got {input_width}")
        if value < 0 or value >> input_width:
            raise ValueError(f"Value {value} does not fit in {input_width} bits")

        self._pending = (self._pending << input_width) | value
        self._pending_count += input_width

        ready = []
        while self._pending_count >= self.width:
            self._pending_count -= self.width
            ready.append(self._pending >> self._pending_count)
            self._pending &= (1 << self._pending_count) - 1
        return ready

    def flush_remainder(self) -> Optional[int]:
        """
        Emit the pending bits as one last value, right padded with zero bits

        Returns None if no bits are pending. The packer is empty afterwards.
        """
        if self._pending_count == 0:
            return None
        value = self._pending << (self.width - self._pending_count)
        self._pending = 0
        self._pending_count = 0
        return value


def repack(values: Iterable[int], input_width: int, output_width: int,
           flush: bool = True) -> Iterator[int]:
    """
    Lazily regroup ``input_width`` bit values into ``output_width`` bit values

    When ``flush`` is set, leftover bits at the end of the input are emitted
    as a final zero padded value, otherwise they are dropped.
    """
    packer = BitPacker(output_width)
    for value in values:
        yield from packer.consume(value, input_width)
    if flush:
        remainder = packer.flush_remainder()
        if remainder is not None:
            yield remainder
