# id3_lab/core/schema.py
# Categorical dataset model: attributes with declared domains, immutable records, and the record set used for training.
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple, Union


class SchemaError(ValueError):
    """Raised when a record or row does not conform to the expected attribute schema."""
    pass


@dataclass(frozen=True)
class Attribute:
    """A named categorical field with a finite, ordered domain of legal values."""
    name: str
    index: int
    values: Tuple[str, ...]

    def __contains__(self, value) -> bool:
        return value in self.values

    def index_of_value(self, value) -> int:
        """Position of `value` in the declared domain, or -1 when it is not declared."""
        try:
            return self.values.index(value)
        except ValueError:
            return -1


@dataclass(frozen=True)
class Schema:
    attributes: Tuple[Attribute, ...]
    class_index: int

    def __post_init__(self):
        if not self.attributes:
            raise SchemaError("schema needs at least one attribute")
        if not 0 <= self.class_index < len(self.attributes):
            raise SchemaError(f"class index {self.class_index} out of range for {len(self.attributes)} attributes")
        names = [a.name for a in self.attributes]
        if len(set(names)) != len(names):
            raise SchemaError(f"duplicate attribute names in {names}")
        for i, a in enumerate(self.attributes):
            if a.index != i:
                raise SchemaError(f"attribute {a.name!r} has index {a.index}, expected {i}")

    @classmethod
    def from_domains(cls, domains: Sequence[Tuple[str, Sequence[str]]],
                     class_name: Optional[str] = None) -> "Schema":
        """Build a schema from (name, domain) pairs. The class attribute defaults to the last one."""
        attrs = tuple(Attribute(name=str(n), index=i, values=tuple(str(v) for v in vals))
                      for i, (n, vals) in enumerate(domains))
        if class_name is None:
            class_index = len(attrs) - 1
        else:
            lookup = {a.name: a.index for a in attrs}
            if class_name not in lookup:
                raise SchemaError(f"class attribute {class_name!r} not in {list(lookup)}")
            class_index = lookup[class_name]
        return cls(attributes=attrs, class_index=class_index)

    @property
    def class_attribute(self) -> Attribute:
        return self.attributes[self.class_index]

    @property
    def features(self) -> Tuple[Attribute, ...]:
        """Attributes in declared order, excluding the class attribute."""
        return tuple(a for a in self.attributes if a.index != self.class_index)

    @property
    def names(self) -> List[str]:
        return [a.name for a in self.attributes]

    def attribute(self, name: str) -> Attribute:
        for a in self.attributes:
            if a.name == name:
                return a
        raise SchemaError(f"no attribute named {name!r}; schema has {self.names}")

    def record(self, values: Union[Mapping[str, Any], Sequence[Any]]) -> "Record":
        """
        Make a Record from either a full row (sequence in attribute order) or a
        mapping of attribute name -> value. With a mapping the class value may be
        left out, which yields an unlabeled record (label None).
        """
        if isinstance(values, Mapping):
            extra = set(values) - set(self.names)
            if extra:
                raise SchemaError(f"unknown attributes {sorted(extra)}; schema has {self.names}")
            row = []
            for a in self.attributes:
                if a.name in values:
                    row.append(values[a.name])
                elif a.index == self.class_index:
                    row.append(None)
                else:
                    raise SchemaError(f"missing value for attribute {a.name!r}")
            return Record(schema=self, values=tuple(row))
        return Record(schema=self, values=tuple(values))

    def same_layout(self, other: "Schema") -> bool:
        """True when both schemas name the same attributes in the same order with the same class."""
        return self.names == other.names and self.class_index == other.class_index


@dataclass(frozen=True)
class Record:
    """One row: a value per schema attribute, the class attribute's value being the label."""
    schema: Schema
    values: Tuple[Any, ...]

    def __post_init__(self):
        if len(self.values) != len(self.schema.attributes):
            raise SchemaError(
                f"row has {len(self.values)} values but schema has {len(self.schema.attributes)} attributes"
            )

    def __getitem__(self, key: Union[Attribute, str]):
        if isinstance(key, Attribute):
            own = self._lookup(key.name)
            if own != key:
                raise SchemaError(
                    f"attribute {key.name!r} here is (index {own.index}, domain {list(own.values)}), "
                    f"expected (index {key.index}, domain {list(key.values)})"
                )
            return self.values[own.index]
        return self.values[self._lookup(key).index]

    def _lookup(self, name: str) -> Attribute:
        for a in self.schema.attributes:
            if a.name == name:
                return a
        raise SchemaError(f"record has no attribute {name!r}; it has {self.schema.names}")

    @property
    def label(self):
        return self.values[self.schema.class_index]

    def as_dict(self) -> Dict[str, Any]:
        return {a.name: v for a, v in zip(self.schema.attributes, self.values)}


@dataclass(frozen=True)
class Dataset:
    """
    An ordered, labeled record set sharing one schema.

    Every non-class value must come from its attribute's declared domain and
    every record must carry a label. The label itself is not checked against the
    class domain: undeclared labels are kept and surface as index -1 when mapped
    back onto the class domain.
    """
    schema: Schema
    records: Tuple[Record, ...]
    relation: str = "dataset"

    def __post_init__(self):
        object.__setattr__(self, "records", tuple(self.records))
        features = self.schema.features
        for n, r in enumerate(self.records):
            if r.schema != self.schema:
                raise SchemaError(f"record {n} uses a different schema")
            if r.label is None:
                raise SchemaError(f"record {n} has no value for class {self.schema.class_attribute.name!r}")
            for a in features:
                v = r.values[a.index]
                if v not in a:
                    raise SchemaError(f"record {n}: value {v!r} not in domain of {a.name!r} {list(a.values)}")

    @classmethod
    def from_rows(cls, domains: Sequence[Tuple[str, Sequence[str]]], rows: Sequence[Sequence[Any]],
                  class_name: Optional[str] = None, relation: str = "dataset") -> "Dataset":
        schema = Schema.from_domains(domains, class_name=class_name)
        return cls(schema=schema, records=tuple(schema.record(row) for row in rows), relation=relation)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    @property
    def attributes(self) -> Tuple[Attribute, ...]:
        return self.schema.features

    @property
    def class_attribute(self) -> Attribute:
        return self.schema.class_attribute

    def labels(self) -> List[Any]:
        return [r.label for r in self.records]
