import dataclasses
import json
import logging
import pathlib
import typing

import cattrs
import cattrs.gen

logger = logging.getLogger(__name__)

# Overrides for the compiled-in key and modifier labels, keyed by override identifier.
LABELS = {
    "numpad": "NumPad",
    "unknown": "Unknown",
}

settings_converter = cattrs.Converter()


LogLevel = typing.NewType("LogLevel", str)


def structure_log_level(v: str):
    level = logging.getLevelName(v.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unexpected log level {v}")
    return LogLevel(logging.getLevelName(level))


settings_converter.register_structure_hook(LogLevel, lambda v, _: structure_log_level(v))


@dataclasses.dataclass(kw_only=True)
class Settings:
    _path: pathlib.Path
    labels: dict[str, str] = dataclasses.field(default_factory=dict)
    log_level: LogLevel = LogLevel("INFO")

    def set_label(self, label_id: str, label: str):
        self.labels[label_id] = label

    def save(self, dest: typing.Optional[pathlib.Path] = None):
        if dest is None:
            dest = self._path
        raw = settings_converter.unstructure(self)
        del raw["_path"]
        with dest.open("w") as outfile:
            json.dump(raw, outfile, indent=2)

    @classmethod
    def load(cls, src: pathlib.Path):
        with src.open() as infile:
            raw = json.load(infile)
        raw["_path"] = src
        settings = settings_converter.structure(raw, cls)
        logger.debug("Loaded %d label overrides from %s", len(settings.labels), src)
        return settings

    @classmethod
    def for_test(cls):
        return settings_converter.structure(
            {
                "_path": "test.settings.json",
                "labels": dict(LABELS),
                "log_level": "DEBUG",
            },
            cls,
        )


settings_converter.register_structure_hook(
    Settings,
    cattrs.gen.make_dict_structure_fn(Settings, settings_converter, _cattrs_detailed_validation=False),
)
