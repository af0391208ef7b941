import copy
import os
import yaml

from core.rating import Glyph, RatingStyle

DEFAULT_CONFIG = {
    "logging_level": "INFO",
    "rating": {
        "space_between": 10.0,
        "label": "",
        "maximum_rating": 5,
        "on_image": "system:star.fill",
        "off_image": None,  # unset: off slots reuse on_image
        "on_colour": "yellow",
        "off_colour": "gray",
    },
    "preview": {
        "initial_rating": 4,
        "window_title": "Rating Preview",
    },
}

# RatingStyle field -> coercion applied to the raw YAML value
_STYLE_FIELDS = {
    "space_between": float,
    "label": str,
    "maximum_rating": int,
    "on_colour": str,
    "off_colour": str,
}


def _default_config_path() -> str:
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return os.path.join(xdg_config_home, "ratingcontrol", "config.yaml")


def _deep_merge(base: dict, override: dict) -> dict:
    result = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


class ConfigManager:
    def __init__(self, config_path: str | None = None):
        self.config_path = config_path or _default_config_path()
        self.config = self.load_config()

    def load_config(self):
        try:
            with open(self.config_path, "r") as f:
                user_config = yaml.safe_load(f) or {}
        except FileNotFoundError:
            self.save_config(DEFAULT_CONFIG)
            return copy.deepcopy(DEFAULT_CONFIG)
        except yaml.YAMLError as exc:
            raise ValueError(f"Malformed config at {self.config_path}") from exc
        if not isinstance(user_config, dict):
            raise ValueError(f"Malformed config at {self.config_path}: expected a mapping")
        return _deep_merge(copy.deepcopy(DEFAULT_CONFIG), user_config)

    def save_config(self, config):
        os.makedirs(os.path.dirname(self.config_path) or ".", exist_ok=True)
        with open(self.config_path, "w") as f:
            yaml.dump(config, f, default_flow_style=False)

    def get(self, key, default=None):
        keys = key.split('.')
        value = self.config
        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
            else:
                return default
        return value if value is not None else default

    def set(self, key, value):
        keys = key.split('.')
        node = self.config
        for k in keys[:-1]:
            node = node.setdefault(k, {})
        node[keys[-1]] = value
        self.save_config(self.config)

    def rating_style(self, section: str = "rating") -> RatingStyle:
        """Builds a RatingStyle from a config section, falling back to field defaults."""
        values = {}
        for name, convert in _STYLE_FIELDS.items():
            raw = self.get(f"{section}.{name}")
            if raw is None:
                continue
            try:
                values[name] = convert(raw)
            except (TypeError, ValueError) as exc:
                raise ValueError(f"Invalid value for {section}.{name}: {raw!r}") from exc

        on_image = self._glyph(f"{section}.on_image")
        if on_image is not None:
            values["on_image"] = on_image
        values["off_image"] = self._glyph(f"{section}.off_image")
        return RatingStyle(**values)

    def _glyph(self, key):
        raw = self.get(key)
        return Glyph.parse(str(raw)) if raw is not None else None
