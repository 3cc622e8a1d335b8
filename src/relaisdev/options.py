"""
Typo-safe options records.

Options are usually juggled as dicts merged with defaults, which lets a
misspelt key slip through silently:

    options = {"overwrite_data": True}
    options["overwrite_date"] = False   # nobody notices

An Options record fixes its names when it is created. Afterwards values may
change but names may not be added or removed, and reading a name that was
never set is an error rather than None:

    options = Options(overwrite_data=True, message="foo")
    options.overwrite_date = False      # FixedOptionsError
    if options.overwrite_data:
        ...

Typical use is a defaults record layered with caller overrides:

    def myfunc(arg1, arg2, **opts):
        options = default_options(overwrite_data=True, message="foo").update(opts)
"""
from typing import Any, Iterator, Mapping

from .exceptions import FixedOptionsError, OptionsError, UnknownOptionError


def _merge_args(mapping: Mapping[str, Any] | None, values: dict[str, Any]) -> dict:
    merged = dict(mapping or {})
    merged.update(values)
    return merged


class Options:
    __slots__ = ("_table",)

    def __init__(self, mapping: Mapping[str, Any] | None = None, /, **values: Any):
        table = _merge_args(mapping, values)
        for name in table:
            if not isinstance(name, str):
                raise TypeError(f"option names must be strings, not {name!r}")
            if name.startswith("_"):
                raise OptionsError(f"option name {name} may not start with '_'")
        object.__setattr__(self, "_table", table)

    def __repr__(self) -> str:
        body = ", ".join(f"{k}={v!r}" for k, v in self._table.items())
        return f"Options({body})"

    def _unknown(self, name: str) -> UnknownOptionError:
        return UnknownOptionError(f"Options has no attribute {name}")

    def __getattr__(self, name: str) -> Any:
        # only reached when normal lookup fails
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._table[name]
        except KeyError:
            raise self._unknown(name) from None

    def __getitem__(self, name: str) -> Any:
        try:
            return self._table[name]
        except KeyError:
            raise self._unknown(name) from None

    def __setattr__(self, name: str, value: Any) -> None:
        self[name] = value

    def __setitem__(self, name: str, value: Any) -> None:
        if name not in self._table:
            raise FixedOptionsError("can't add to Options once created")
        self._table[name] = value

    def __delattr__(self, name: str) -> None:
        raise FixedOptionsError("can't delete from Options once created")

    def __delitem__(self, name: str) -> None:
        raise FixedOptionsError("can't delete from Options once created")

    def __contains__(self, name: object) -> bool:
        return name in self._table

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Options):
            return False
        return self._table == other._table

    __hash__ = None  # type: ignore[assignment]

    def __getstate__(self) -> dict:
        return self._table

    def __setstate__(self, state: dict) -> None:
        object.__setattr__(self, "_table", dict(state))

    def update(
        self, mapping: Mapping[str, Any] | None = None, /, **values: Any
    ) -> "Options":
        """
        Overwrite existing values and return self.

        Unlike dict.update, every name must already exist. All names are
        checked before anything is written, so a bad batch changes nothing.
        """
        changes = _merge_args(mapping, values)
        unknown = [name for name in changes if name not in self._table]
        if unknown:
            raise UnknownOptionError(
                f"Options has no attribute(s) {', '.join(map(str, unknown))}"
            )
        self._table.update(changes)
        return self

    def keys(self):
        return self._table.keys()

    def as_dict(self) -> dict[str, Any]:
        return dict(self._table)

    def copy(self) -> "Options":
        return Options(self._table)


def default_options(mapping: Mapping[str, Any] | None = None, /, **values: Any) -> Options:
    """
    Create an options record holding these default values.
    """
    return Options(mapping, **values)
