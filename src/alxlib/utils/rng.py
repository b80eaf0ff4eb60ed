"""
Lehmer-style pseudo-random generation for AlxLib.

The core is a stateless 64-bit multiply-xor-shift mixer: the same seed always
gives the same output. Stateful convenience comes from LehmerRNG streams,
each owning a seed counter that is incremented before every draw. The
zero-argument module functions use three private streams, one each for
ints, floats and bools, so they never disturb each other.

Not cryptographically secure, and the implicit streams are not safe to share
between threads. Give each worker its own LehmerRNG (or use RNGManager).
"""

from typing import Dict, Optional

from ..output.debug_logger import get_logger

UINT64_MASK = 0xFFFFFFFFFFFFFFFF
UINT64_MAX = UINT64_MASK

_SEED_OFFSET = 0xe120fc15
_MUL_1 = 0x4a39b70d
_MUL_2 = 0x12fad5c9


def _mix(seed: int) -> int:
    s = (seed + _SEED_OFFSET) & UINT64_MASK
    tmp = (s * _MUL_1) & UINT64_MASK
    m1 = (tmp >> 32) ^ tmp
    tmp = (m1 * _MUL_2) & UINT64_MASK
    return (tmp >> 32) ^ tmp


class LehmerRNG:
    """
    A Lehmer random stream with its own seed counter.

    Each draw increments the counter and mixes it, so a stream started at
    seed s yields lehmer_int64(s + 1), lehmer_int64(s + 2), ...

    Attributes:
        seed: The starting seed of this stream
        name: Name for debugging

    Example:
        >>> rng = LehmerRNG(seed=0, name="loot")
        >>> rng.next_int() == lehmer_int64(1)
        True
    """

    def __init__(self, seed: int = 0, name: str = "default"):
        self.name = name
        self.seed = seed & UINT64_MASK
        self._counter = self.seed
        self._call_count = 0

    @property
    def counter(self) -> int:
        """Seed used by the most recent draw (or the start seed)."""
        return self._counter

    def _advance(self) -> int:
        self._counter = (self._counter + 1) & UINT64_MASK
        self._call_count += 1
        get_logger().log_seed_advance(self.name, self._counter)
        return self._counter

    def next_int(self) -> int:
        """Return the next unsigned 64-bit value."""
        return _mix(self._advance())

    def next_float(self) -> float:
        """Return the next float in [0.0, 1.0]."""
        return _mix(self._advance()) / UINT64_MAX

    def next_bool(self) -> bool:
        """Return the parity of the next value."""
        return _mix(self._advance()) % 2 == 1

    def reset(self, seed: Optional[int] = None) -> None:
        """
        Rewind the stream to its start seed, or restart from a new one.

        Args:
            seed: New start seed. If None, uses the original seed.
        """
        if seed is not None:
            self.seed = seed & UINT64_MASK
        self._counter = self.seed
        self._call_count = 0

    def get_state(self) -> dict:
        """Get the current state of the stream for serialization."""
        return {
            'name': self.name,
            'seed': self.seed,
            'counter': self._counter,
            'call_count': self._call_count,
        }

    def set_state(self, state: dict) -> None:
        """Restore stream state from a previous get_state() call."""
        self.name = state['name']
        self.seed = state['seed']
        self._counter = state['counter']
        self._call_count = state['call_count']

    def __repr__(self) -> str:
        return f"LehmerRNG(seed={self.seed}, name='{self.name}', calls={self._call_count})"


_INT_STREAM = LehmerRNG(name="lehmer_int64")
_FLOAT_STREAM = LehmerRNG(name="lehmer_float")
_BOOL_STREAM = LehmerRNG(name="rand_bool")


def lehmer_int64(seed: Optional[int] = None) -> int:
    """
    Mix a seed into an unsigned 64-bit pseudo-random value.

    All arithmetic wraps modulo 2**64, negative seeds included.

    Args:
        seed: Seed to mix. If None, the next value of the implicit
            int stream is returned.

    Returns:
        Integer in [0, 2**64 - 1]

    Example:
        >>> hex(lehmer_int64(0))
        '0x9772dde98cf8a500'
    """
    if seed is None:
        return _INT_STREAM.next_int()
    return _mix(seed & UINT64_MASK)


def lehmer_float(seed: Optional[int] = None) -> float:
    """
    Return a pseudo-random float in [0.0, 1.0].

    Both endpoints are reachable (up to float rounding).
    """
    if seed is None:
        return _FLOAT_STREAM.next_float()
    return lehmer_int64(seed) / UINT64_MAX


def rand_bool(seed: Optional[int] = None) -> bool:
    """Return a pseudo-random bool (parity of the Lehmer value)."""
    if seed is None:
        return _BOOL_STREAM.next_bool()
    return lehmer_int64(seed) % 2 == 1


class RNGManager:
    """
    Manages multiple named Lehmer streams.

    Stream start seeds are drawn from a master stream, so a given master
    seed reproduces the same set of streams as long as they are requested
    in the same order.

    Example:
        >>> manager = RNGManager(master_seed=42)
        >>> spawns = manager.get('spawns')
        >>> manager.get('spawns') is spawns
        True
    """

    def __init__(self, master_seed: int = 0):
        self._master = LehmerRNG(seed=master_seed, name="master")
        self._streams: Dict[str, LehmerRNG] = {}
        self.master_seed = self._master.seed

    def get(self, name: str) -> LehmerRNG:
        """
        Get or create a named stream.

        Args:
            name: Name of the stream

        Returns:
            LehmerRNG instance for the named stream
        """
        if name not in self._streams:
            derived_seed = self._master.next_int()
            self._streams[name] = LehmerRNG(seed=derived_seed, name=name)
            get_logger().log_stream_created(name, derived_seed)
        return self._streams[name]

    def __contains__(self, name: str) -> bool:
        return name in self._streams

    @property
    def names(self):
        """Names of the streams created so far, in creation order."""
        return list(self._streams)

    def reset_all(self) -> None:
        """Drop all streams and rewind the master stream."""
        self._master.reset()
        self._streams.clear()

    def get_state(self) -> dict:
        """Get state of all streams."""
        return {
            'master_seed': self.master_seed,
            'master': self._master.get_state(),
            'streams': {name: rng.get_state() for name, rng in self._streams.items()}
        }

    def __repr__(self) -> str:
        streams = ', '.join(self._streams.keys())
        return f"RNGManager(master_seed={self.master_seed}, streams=[{streams}])"
