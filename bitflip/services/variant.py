from typing import Any, Optional, Tuple


class Variant(dict):
    """
    One bitflip result: the produced `value`, the `mode` that produced it and,
    usually, the byte `offset` and `bit` that were flipped.

    Keys double as attributes. Two variants are equal when their values are,
    so a set of variants keeps one entry per distinct output.
    """
    def __getattr__(self, item: str) -> Any:
       try:
          return self[item]
       except KeyError:
          raise AttributeError(f"'{type(self).__name__}' object has no attribute '{item}'") from None

    __setattr__ = dict.__setitem__

    def __init__(self, **kwargs: Any):
       super().__init__()
       self['mode'] = kwargs.pop('mode', '')
       self['value'] = kwargs.pop('value', '')
       self.update(kwargs)

    def __hash__(self) -> int:
       return hash(self.get('value', ''))

    def __eq__(self, other: object) -> bool:
       if not isinstance(other, dict):
             return NotImplemented
       return self.get('value', '') == other.get('value', '')

    def __lt__(self, other: 'Variant') -> bool:
       """Orders by mode, then flip position, then value."""
       if not isinstance(other, Variant):
             return NotImplemented
       return self._sort_key() < other._sort_key()

    def _sort_key(self) -> Tuple[str, int, int, str]:
       return self.mode, self.get('offset', -1), self.get('bit', -1), self.value

    def position(self) -> Tuple[Optional[int], Optional[int]]:
       """(offset, bit) the variant was produced at, if recorded."""
       return self.get('offset'), self.get('bit')

    def copy(self) -> 'Variant':
       return Variant(**self)

    def __repr__(self) -> str:
        extra = "".join(f", {k}={v!r}" for k, v in self.items() if k not in ('mode', 'value'))
        return f"{type(self).__name__}(mode='{self.mode}', value={self.value!r}{extra})"
