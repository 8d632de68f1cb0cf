"""Preset collections on disk and the batch repair that runs over them.

A collection is a JSON document::

	{
		"version": "1.46",
		"presets": [
			{"id": "beginner-paradiddle", "name": "Paradiddle", "description": "...",
			 "category": "rudiments", "tags": ["paradiddle"],
			 "timeSignature": "4/4", "subdivision": 16, "phrase": "4 4 4 4",
			 "drumPattern": "S S S S", "stickingPattern": "R L R R L R L L",
			 "repeat": 1, "accents": [0, 8], "leftFoot": false, "rightFoot": false}
		]
	}

Batch repair reads the whole document, normalizes every preset on its own and
writes the whole document back with the version bumped. A preset that cannot
be repaired is reported and written back exactly as it was read.
"""

import copy
import dataclasses
import json
import logging
import os
import tempfile
import typing

import stickwork.exceptions
import stickwork.pattern
import stickwork.repair
import stickwork.rudiments


logger = logging.getLogger(__name__)


@dataclasses.dataclass
class Preset:

	"""
	A stored pattern with its identity and display text.

	``source`` keeps the preset exactly as read, including keys this package
	does not know about, so they survive a rewrite.
	"""

	id: str
	name: str
	description: str
	category: str
	tags: typing.List[str]
	source: typing.Dict[str, typing.Any]

	@property
	def metadata (self) -> stickwork.pattern.PresetMetadata:
		return stickwork.pattern.PresetMetadata(name=self.name, description=self.description, tags=list(self.tags))

	def pattern (self) -> stickwork.pattern.Pattern:

		"""Parse the stored pattern fields. Raises ``FormatError`` on bad data."""

		return stickwork.pattern.Pattern.from_dict(self.source)

	@classmethod
	def from_dict (cls, data: typing.Mapping[str, typing.Any]) -> "Preset":

		if not isinstance(data, dict):
			raise stickwork.exceptions.FormatError(f"Preset must be an object, got {type(data).__name__}")

		tags = data.get("tags") or []

		if not isinstance(tags, list):
			raise stickwork.exceptions.FormatError(f"Preset tags must be a list, got {tags!r}")

		return cls(
			id = str(data.get("id", "")),
			name = str(data.get("name") or ""),
			description = str(data.get("description") or ""),
			category = str(data.get("category") or ""),
			tags = [str(tag) for tag in tags],
			source = copy.deepcopy(dict(data))
		)

	def to_dict (self) -> typing.Dict[str, typing.Any]:
		return copy.deepcopy(self.source)

	def with_pattern (self, pattern: stickwork.pattern.Pattern, description: typing.Optional[str] = None) -> "Preset":

		"""Return a copy carrying ``pattern`` (and optionally a new description)."""

		source = copy.deepcopy(self.source)
		source.update(pattern.to_dict())

		if pattern.accents is None:
			source.pop("accents", None)

		if description is not None:
			source["description"] = description

		return dataclasses.replace(self, description=self.description if description is None else description, source=source)


@dataclasses.dataclass
class PresetCollection:

	version: str
	presets: typing.List[Preset] = dataclasses.field(default_factory=list)
	extra: typing.Dict[str, typing.Any] = dataclasses.field(default_factory=dict)

	@classmethod
	def from_dict (cls, data: typing.Mapping[str, typing.Any]) -> "PresetCollection":

		if not isinstance(data, dict) or not isinstance(data.get("presets"), list):
			raise stickwork.exceptions.FormatError("Preset document must be an object with a 'presets' list")

		version = data.get("version", "1.0")

		return cls(
			version = str(version),
			presets = [Preset.from_dict(entry) for entry in data["presets"]],
			extra = {k: copy.deepcopy(v) for k, v in data.items() if k not in ("version", "presets")}
		)

	def to_dict (self) -> typing.Dict[str, typing.Any]:

		data: typing.Dict[str, typing.Any] = {"version": self.version}
		data.update(copy.deepcopy(self.extra))
		data["presets"] = [preset.to_dict() for preset in self.presets]

		return data


@dataclasses.dataclass
class BatchFailure:

	preset_id: str
	reason: str


@dataclasses.dataclass
class BatchResult:

	"""
	Outcome of :func:`normalize_collection`.

	Attributes:
		collection: The rewritten collection (failed presets unchanged).
		changed: Ids of presets whose stored data changed.
		failures: Presets that could not be repaired, with the reason.
		unmatched_rudiments: Ids of presets that talk about rudiments but match
			no catalog entry, so their sticking was only fitted.
	"""

	collection: PresetCollection
	changed: typing.List[str] = dataclasses.field(default_factory=list)
	failures: typing.List[BatchFailure] = dataclasses.field(default_factory=list)
	unmatched_rudiments: typing.List[str] = dataclasses.field(default_factory=list)

	@property
	def ok (self) -> bool:
		return not self.failures


def bump_version (version: str) -> str:

	"""
	Increment the last numeric component of a dotted version.

	Example:
		```python
		bump_version("1.46")   # "1.47"
		bump_version("2")      # "3"
		```
	"""

	parts = str(version).strip().split(".")

	if not all(part.isdecimal() for part in parts):
		raise stickwork.exceptions.FormatError(f"Version {version!r} is not a dotted number")

	parts[-1] = str(int(parts[-1]) + 1)

	return ".".join(parts)


def load_collection (path: str) -> PresetCollection:

	"""Read a preset document. Raises ``FormatError`` when it is not valid JSON or has the wrong shape."""

	with open(path, "r", encoding="utf-8") as f:
		try:
			data = json.load(f)
		except json.JSONDecodeError as exc:
			raise stickwork.exceptions.FormatError(f"{path} is not valid JSON: {exc}") from exc

	return PresetCollection.from_dict(data)


def save_collection (collection: PresetCollection, path: str) -> None:

	"""
	Write the whole document, replacing ``path`` only once the write has finished.
	"""

	directory = os.path.dirname(os.path.abspath(path))
	fd, temp_path = tempfile.mkstemp(prefix=".presets-", suffix=".json", dir=directory)

	try:
		with os.fdopen(fd, "w", encoding="utf-8") as f:
			json.dump(collection.to_dict(), f, indent=2, ensure_ascii=False)
			f.write("\n")
		os.replace(temp_path, path)

	except BaseException:
		if os.path.exists(temp_path):
			os.unlink(temp_path)
		raise

	logger.info(f"Saved {len(collection.presets)} presets (version {collection.version}) to {path}")


def normalize_preset (preset: Preset, apply_disco_voicing: bool = True) -> Preset:

	"""
	Repair one preset.

	Raises ``StickworkError`` when the stored data cannot be parsed or the
	repaired pattern still breaks an invariant (for example an empty voicing
	line, which no amount of repeating can fill).
	"""

	pattern = preset.pattern()
	metadata = preset.metadata
	fixed = stickwork.repair.normalize(pattern, metadata, apply_disco_voicing=apply_disco_voicing)
	stickwork.pattern.require_valid(fixed)

	description = None

	if not apply_disco_voicing and stickwork.repair.needs_four_on_the_floor(fixed, metadata.text(), fixed.notes_per_bar):
		description = stickwork.repair.four_on_the_floor_description(preset.description)

	return preset.with_pattern(fixed, description=description)


def normalize_collection (collection: PresetCollection, apply_disco_voicing: bool = True) -> BatchResult:

	"""
	Normalize every preset and bump the collection version.

	Presets are independent of one another. A preset that fails is logged,
	listed in ``failures`` and kept unchanged; the rest carry on.
	"""

	result = BatchResult(collection=PresetCollection(version=bump_version(collection.version), extra=copy.deepcopy(collection.extra)))

	for preset in collection.presets:

		try:
			fixed = normalize_preset(preset, apply_disco_voicing=apply_disco_voicing)

		except stickwork.exceptions.StickworkError as exc:
			logger.warning(f"Could not normalize preset {preset.id!r}: {exc}")
			result.failures.append(BatchFailure(preset_id=preset.id, reason=str(exc)))
			result.collection.presets.append(preset)
			continue

		if fixed.source != preset.source:
			result.changed.append(preset.id)
			logger.debug(f"Normalized {preset.id}: {preset.name}")

		metadata = preset.metadata

		if stickwork.rudiments.is_rudiment_text(metadata.text()) and stickwork.rudiments.match_metadata(metadata) is None:
			result.unmatched_rudiments.append(preset.id)
			logger.info(f"Preset {preset.id!r} mentions a rudiment that is not in the catalog")

		result.collection.presets.append(fixed)

	logger.info(f"Normalized {len(collection.presets)} presets: {len(result.changed)} changed, {len(result.failures)} failed")

	return result


def normalize_file (path: str, output: typing.Optional[str] = None, apply_disco_voicing: bool = True) -> BatchResult:

	"""Load, normalize and save a preset document (in place unless ``output`` is given)."""

	collection = load_collection(path)
	result = normalize_collection(collection, apply_disco_voicing=apply_disco_voicing)
	save_collection(result.collection, output or path)

	return result
