import json
import typing

import pytest


def make_preset (preset_id: str, **overrides: typing.Any) -> typing.Dict[str, typing.Any]:

	"""Return a stored preset with every field set, overridden as given."""

	preset = {
		"id": preset_id,
		"name": preset_id.replace("-", " ").title(),
		"description": "",
		"category": "practice",
		"tags": [],
		"timeSignature": "4/4",
		"subdivision": 16,
		"phrase": "4 4 4 4",
		"drumPattern": "S S S S S S S S S S S S S S S S",
		"stickingPattern": "R L R L R L R L R L R L R L R L",
		"repeat": 1,
		"leftFoot": False,
		"rightFoot": False,
	}
	preset.update(overrides)
	return preset


@pytest.fixture
def presets_path (tmp_path: typing.Any) -> typing.Callable[..., str]:

	"""Write a preset document to a temporary file and return its path."""

	def write (presets: typing.List[typing.Dict[str, typing.Any]], version: str = "1.46") -> str:
		path = tmp_path / "practice-presets.json"
		path.write_text(json.dumps({"version": version, "presets": presets}), encoding="utf-8")
		return str(path)

	return write
