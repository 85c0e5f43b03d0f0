"""
Dataset: one numeric response plus categorical factors.

Dataset is the "I have observations" abstraction consumed by both the
grouped summary and the two-sample comparisons. It is immutable once
built; subsetting returns a new Dataset.

Usage:
    from statsengine import Dataset

    ds = Dataset.from_arrays(len_values, response_name='len',
                             supp=supp, dose=dose,
                             levels={'dose': (0.5, 1.0, 2.0)})
    ds = Dataset.from_records(rows, response='len', factors=['supp', 'dose'])
    ds = Dataset.from_dataframe(df, response='len')
    ds = Dataset.from_file("toothgrowth.csv", response='len')

    ds.factor_names        # ('supp', 'dose')
    ds.levels('dose')      # (0.5, 1.0, 2.0)
    ds.responses(supp='VC', dose=2.0)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Mapping, Sequence, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from statsengine.core.exceptions import InvalidInputError
from statsengine.core.validation import (
    check_array,
    check_finite,
    check_1d,
    check_consistent_length,
)

if TYPE_CHECKING:
    import pandas as pd


def _natural_key(value: Any) -> tuple[int, Any]:
    """Sort numeric labels numerically, everything else by string form."""
    if isinstance(value, (int, float, np.integer, np.floating)) and not isinstance(value, bool):
        return (0, float(value))
    return (1, str(value))


def _as_labels(values: ArrayLike, name: str) -> NDArray[np.object_]:
    if isinstance(values, (str, bytes)) or not hasattr(values, "__iter__"):
        raise InvalidInputError(f"{name}: factor values must be a sequence of labels")
    values = list(values)
    labels = np.empty(len(values), dtype=object)
    for i, v in enumerate(values):
        if isinstance(v, np.generic):
            v = v.item()
        if isinstance(v, float) and np.isnan(v):
            raise InvalidInputError(f"{name}: missing label at row {i}")
        labels[i] = v
    return labels


def _check_label_kinds(values: Iterable[Any], name: str) -> None:
    """Reject booleans alongside numbers; True == 1 would merge their groups."""
    has_bool = False
    has_number = False
    for v in values:
        if isinstance(v, bool):
            has_bool = True
        elif isinstance(v, (int, float)):
            has_number = True
    if has_bool and has_number:
        raise InvalidInputError(
            f"{name}: boolean labels cannot be mixed with numeric labels"
        )


@dataclass(frozen=True)
class Observation:
    """
    One row of a Dataset: a response value and its factor labels.

    Factors may be passed as a mapping; they are stored as a tuple of
    (name, label) pairs so the record is hashable.
    """
    response: float
    factors: tuple[tuple[str, Any], ...] = ()

    def __post_init__(self) -> None:
        factors = self.factors
        if isinstance(factors, Mapping):
            factors = factors.items()
        object.__setattr__(self, 'factors', tuple((str(k), v) for k, v in factors))

    @property
    def labels(self) -> dict[str, Any]:
        """Factor name -> label, as a fresh dict."""
        return dict(self.factors)

    def __getitem__(self, name: str) -> Any:
        for key, value in self.factors:
            if key == name:
                return value
        raise KeyError(name)


@dataclass(frozen=True, eq=False)
class Dataset:
    """
    Immutable table of observations with one numeric response.

    Construct via factory classmethods, not directly.

    Each factor keeps a tuple of levels. Levels are either supplied by the
    caller (an ordered categorical such as dose 0.5 < 1 < 2) or default to
    the distinct labels in natural order. Labels are stored alongside their
    integer codes into the level tuple.
    """
    _response: NDArray[np.floating[Any]]
    _response_name: str
    _factors: dict[str, NDArray[np.object_]]
    _codes: dict[str, NDArray[np.intp]]
    _levels: dict[str, tuple[Any, ...]]
    _metadata: dict[str, Any] = field(default_factory=dict)

    # === Factory Methods ===

    @classmethod
    def from_arrays(
        cls,
        response: ArrayLike,
        *,
        response_name: str = 'response',
        levels: Mapping[str, Sequence[Any]] | None = None,
        **factors: ArrayLike,
    ) -> Dataset:
        """Construct from a response vector and one vector per factor."""
        return cls._build(
            response,
            response_name=response_name,
            factors=factors,
            levels=levels,
            source='arrays',
        )

    @classmethod
    def from_records(
        cls,
        records: Iterable[Mapping[str, Any]],
        *,
        response: str,
        factors: Sequence[str],
        levels: Mapping[str, Sequence[Any]] | None = None,
    ) -> Dataset:
        """Construct from an iterable of row mappings."""
        rows = list(records)
        columns: dict[str, list[Any]] = {name: [] for name in factors}
        values: list[Any] = []
        for i, row in enumerate(rows):
            missing = [k for k in (response, *factors) if k not in row]
            if missing:
                raise InvalidInputError(
                    f"record {i}: missing field(s) {missing}"
                )
            values.append(row[response])
            for name in factors:
                columns[name].append(row[name])

        return cls._build(
            values,
            response_name=response,
            factors=columns,
            levels=levels,
            source='records',
        )

    @classmethod
    def from_dataframe(
        cls,
        df: 'pd.DataFrame',
        *,
        response: str,
        factors: Sequence[str] | None = None,
        levels: Mapping[str, Sequence[Any]] | None = None,
        source_path: str | None = None,
    ) -> Dataset:
        """
        Construct from a pandas DataFrame.

        Factors default to every column other than the response. Ordered
        pandas categoricals contribute their category order as levels
        unless levels are given explicitly.
        """
        if response not in df.columns:
            raise InvalidInputError(
                f"response column {response!r} not found. Available: {list(df.columns)}"
            )
        if factors is None:
            factors = [c for c in df.columns if c != response]
        unknown = [f for f in factors if f not in df.columns]
        if unknown:
            raise InvalidInputError(
                f"factor column(s) {unknown} not found. Available: {list(df.columns)}"
            )

        merged_levels: dict[str, Sequence[Any]] = {}
        for name in factors:
            col = df[name]
            if hasattr(col, 'cat') and col.cat.ordered:
                merged_levels[name] = list(col.cat.categories)
        if levels:
            merged_levels.update(levels)

        return cls._build(
            df[response].to_numpy(),
            response_name=str(response),
            factors={str(name): df[name].tolist() for name in factors},
            levels=merged_levels,
            source='dataframe',
            source_path=source_path,
        )

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        *,
        response: str,
        factors: Sequence[str] | None = None,
        levels: Mapping[str, Sequence[Any]] | None = None,
    ) -> Dataset:
        """Construct from a delimited text file (CSV, TSV)."""
        path = Path(path)
        suffix = path.suffix.lower()

        if suffix == '.csv':
            import pandas as pd
            df = pd.read_csv(path)
        elif suffix == '.tsv':
            import pandas as pd
            df = pd.read_csv(path, sep='\t')
        else:
            raise InvalidInputError(f"Unknown file format: {suffix}")

        return cls.from_dataframe(
            df,
            response=response,
            factors=factors,
            levels=levels,
            source_path=str(path),
        )

    @classmethod
    def _build(
        cls,
        response: ArrayLike,
        *,
        response_name: str,
        factors: Mapping[str, ArrayLike],
        levels: Mapping[str, Sequence[Any]] | None,
        source: str,
        source_path: str | None = None,
    ) -> Dataset:
        """Internal builder with validation."""
        y = check_array(response, response_name)
        check_1d(y, response_name)
        check_finite(y, response_name)

        if response_name in factors:
            raise InvalidInputError(
                f"{response_name!r} is used both as the response and as a factor"
            )

        levels = dict(levels or {})
        unknown = sorted(set(levels) - set(factors))
        if unknown:
            raise InvalidInputError(
                f"levels given for unknown factor(s) {unknown}. "
                f"Factors: {list(factors)}"
            )

        labels_by_name: dict[str, NDArray[np.object_]] = {}
        codes_by_name: dict[str, NDArray[np.intp]] = {}
        levels_by_name: dict[str, tuple[Any, ...]] = {}

        for name, values in factors.items():
            labels = _as_labels(values, name)
            check_consistent_length(y, labels, names=(response_name, name))

            if name in levels:
                declared = tuple(
                    v.item() if isinstance(v, np.generic) else v
                    for v in levels[name]
                )
                _check_label_kinds((*labels.tolist(), *declared), name)
                if len(set(declared)) != len(declared):
                    raise InvalidInputError(
                        f"{name}: declared levels contain duplicates: {declared}"
                    )
                undeclared = set(labels.tolist()) - set(declared)
                if undeclared:
                    raise InvalidInputError(
                        f"{name}: labels {sorted(undeclared, key=_natural_key)} "
                        f"are not among the declared levels {declared}"
                    )
            else:
                _check_label_kinds(labels.tolist(), name)
                declared = tuple(sorted(set(labels.tolist()), key=_natural_key))

            index = {level: i for i, level in enumerate(declared)}
            codes = np.fromiter(
                (index[v] for v in labels), dtype=np.intp, count=len(labels)
            )
            # Store the canonical level value so keys compare consistently
            canonical = np.empty(len(labels), dtype=object)
            for i, code in enumerate(codes):
                canonical[i] = declared[code]

            canonical.flags.writeable = False
            codes.flags.writeable = False
            labels_by_name[name] = canonical
            codes_by_name[name] = codes
            levels_by_name[name] = declared

        y = y.copy()
        y.flags.writeable = False

        metadata = {'n_observations': int(y.shape[0]), 'source': source}
        if source_path:
            metadata['source_path'] = source_path

        return cls(
            _response=y,
            _response_name=response_name,
            _factors=labels_by_name,
            _codes=codes_by_name,
            _levels=levels_by_name,
            _metadata=metadata,
        )

    # === Properties ===

    @property
    def n_observations(self) -> int:
        """Number of observations (rows)."""
        return int(self._response.shape[0])

    def __len__(self) -> int:
        return self.n_observations

    @property
    def response(self) -> NDArray[np.floating[Any]]:
        """Read-only response vector."""
        return self._response

    @property
    def response_name(self) -> str:
        return self._response_name

    @property
    def factor_names(self) -> tuple[str, ...]:
        return tuple(self._factors)

    @property
    def metadata(self) -> dict[str, Any]:
        """Provenance metadata (source, n_observations, source_path)."""
        return self._metadata.copy()

    # === Factor Access ===

    def check_factor(self, name: str) -> None:
        """
        Raise if name is not a factor of this dataset.

        Raises:
            InvalidInputError: listing the available factors
        """
        if name not in self._factors:
            raise InvalidInputError(
                f"Dataset has no factor {name!r}. Available: {self.factor_names}"
            )

    def levels(self, name: str) -> tuple[Any, ...]:
        """Declared levels of a factor, in order."""
        self.check_factor(name)
        return self._levels[name]

    def factor(self, name: str) -> NDArray[np.object_]:
        """Read-only label vector of a factor."""
        self.check_factor(name)
        return self._factors[name]

    def codes(self, name: str) -> NDArray[np.intp]:
        """Read-only integer codes of a factor into levels(name)."""
        self.check_factor(name)
        return self._codes[name]

    def records(self) -> tuple[Observation, ...]:
        """All observations as immutable records, in dataset order."""
        names = self.factor_names
        return tuple(
            Observation(
                response=float(self._response[i]),
                factors={name: self._factors[name][i] for name in names},
            )
            for i in range(self.n_observations)
        )

    # === Row Selection ===

    def mask(self, where: Mapping[str, Any] | None = None, **criteria: Any) -> NDArray[np.bool_]:
        """
        Boolean row mask for factor equality criteria.

        A list, tuple or set value selects any of the given labels. Labels
        that are not levels of the factor simply match nothing.
        """
        merged = dict(where or {})
        merged.update(criteria)
        keep = np.ones(self.n_observations, dtype=bool)
        for name, wanted in merged.items():
            self.check_factor(name)
            if isinstance(wanted, (list, tuple, set, frozenset)):
                wanted_values = list(wanted)
            else:
                wanted_values = [wanted]
            index = {level: i for i, level in enumerate(self._levels[name])}
            wanted_codes = [index[v] for v in wanted_values if v in index]
            keep &= np.isin(self._codes[name], wanted_codes)
        return keep

    def subset(self, where: Mapping[str, Any] | None = None, **criteria: Any) -> Dataset:
        """New Dataset restricted to rows matching the criteria; levels are kept."""
        keep = self.mask(where, **criteria)

        def _frozen(arr: NDArray) -> NDArray:
            out = arr[keep]
            out.flags.writeable = False
            return out

        metadata = self._metadata.copy()
        metadata['n_observations'] = int(np.sum(keep))
        return Dataset(
            _response=_frozen(self._response),
            _response_name=self._response_name,
            _factors={k: _frozen(v) for k, v in self._factors.items()},
            _codes={k: _frozen(v) for k, v in self._codes.items()},
            _levels=dict(self._levels),
            _metadata=metadata,
        )

    def responses(self, where: Mapping[str, Any] | None = None, **criteria: Any) -> NDArray[np.floating[Any]]:
        """Response values of the rows matching the criteria."""
        return self._response[self.mask(where, **criteria)]

    def __repr__(self) -> str:
        factors = ", ".join(f"{k}[{len(v)}]" for k, v in self._levels.items())
        return (
            f"Dataset(n={self.n_observations}, response={self._response_name!r}, "
            f"factors=({factors}))"
        )
