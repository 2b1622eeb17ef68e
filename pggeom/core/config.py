from __future__ import annotations

import enum
import importlib.resources
import logging
import os
import pathlib
import sys
from typing import Any, Dict, Iterator, List, Optional, Tuple

from ruamel.yaml import YAML

from pggeom.exceptions import InvalidConfigValue
from pggeom.utils.config import asbool
from pggeom.utils.imports import importstr
from pggeom.utils.schema import NA

Schema = Dict[str, Any]
Key = Tuple[str, ...]

yaml = YAML(typ='safe')

log = logging.getLogger(__name__)

ENV_PREFIX = 'PGGEOM_'

# Option name -> {type, default, items}, `items` of an object type holds
# nested options.
SCHEMA: Schema = yaml.load(
    importlib.resources.files('pggeom').joinpath('config.yml').read_text()
)


def read_config(args=None, envfile=None, environ=None) -> RawConfig:
    rc = RawConfig()
    rc.read([
        EnvFile('envfile', envfile or '.env'),
        EnvVars('envvars', os.environ if environ is None else environ),
        CliArgs('cliargs', args or []),
    ])

    # Files listed in `config` go first, environment and command line
    # options still override them.
    configs = rc.get('config')
    if configs:
        rc.read([Path(c, c) for c in configs], index=0)

    return rc


def get_option_schema(schema: Schema, key: Key) -> Optional[Schema]:
    """Find schema of an option, `None` if option is unknown."""
    option = None
    for name in key:
        if schema is None or name not in schema:
            return None
        option = schema[name]
        schema = option.get('items') if option['type'] == 'object' else None
    return option


def iter_option_keys(schema: Schema, prefix: Key = ()) -> Iterator[Key]:
    for name, option in schema.items():
        key = prefix + (name,)
        if option['type'] == 'object':
            yield from iter_option_keys(option['items'], key)
        else:
            yield key


def cast_option(option: Schema, key: Key, value: Any) -> Any:
    # Values from environment and command line are always strings.
    type_ = option['type']
    try:
        if type_ == 'integer':
            return int(value)
        if type_ == 'boolean':
            return asbool(value)
        if type_ == 'array':
            if isinstance(value, str):
                return [v.strip() for v in value.split(',') if v.strip()]
            return list(value)
    except (AttributeError, TypeError, ValueError):
        raise InvalidConfigValue(name='.'.join(key), value=value, type=type_)
    return value


def _flatten(value: Any, key: Key = ()) -> Iterator[Tuple[Key, Any]]:
    if isinstance(value, dict):
        for k, v in value.items():
            yield from _flatten(v, key + tuple(k.split('.')))
    else:
        yield key, value


class KeyFormat(str, enum.Enum):
    cfg = 'cfg'
    env = 'env'


class ConfigSource:
    name: str = None

    def __init__(self, name=None, config=None):
        self.name = name or self.name or type(self).__name__
        self.config = config
        self.values: Dict[Key, Any] = {}

    def __repr__(self):
        return f'{type(self).__name__}({self.name!r})'

    def read(self, schema: Schema) -> None:
        raise NotImplementedError

    def set(self, schema: Schema, key: Key, value: Any) -> None:
        option = get_option_schema(schema, key)
        if option is None or option['type'] == 'object':
            log.warning(
                "Unknown configuration option %r in %s.",
                '.'.join(key), self.name,
            )
            return
        self.values[key] = value

    def get(self, key: Key) -> Any:
        return self.values.get(key, NA)


class PyDict(ConfigSource):
    """Python dict, nested or with dotted keys."""

    def read(self, schema: Schema) -> None:
        for key, value in _flatten(self.config):
            self.set(schema, key, value)


class Path(PyDict):
    """YAML file path or `module:NAME` python path to a dict."""

    def read(self, schema: Schema) -> None:
        if self.config.endswith(('.yml', '.yaml')):
            self.config = yaml.load(pathlib.Path(self.config).read_text())
        else:
            self.config = dict(importstr(self.config))
        super().read(schema)


class CliArgs(PyDict):
    name = 'cli'

    def read(self, schema: Schema) -> None:
        self.config = dict(arg.split('=', 1) for arg in self.config)
        super().read(schema)


class EnvVars(ConfigSource):
    """`PGGEOM_` variables, `__` separates nested option names."""

    name = 'env'

    def read(self, schema: Schema) -> None:
        for name, value in self.config.items():
            if name.startswith(ENV_PREFIX):
                key = tuple(name[len(ENV_PREFIX):].lower().split('__'))
                self.set(schema, key, value)


class EnvFile(EnvVars):

    def read(self, schema: Schema) -> None:
        path = pathlib.Path(self.config)
        self.config = {}
        if path.exists():
            for line in path.read_text().splitlines():
                line = line.strip()
                if line and not line.startswith('#') and '=' in line:
                    name, value = line.split('=', 1)
                    self.config[name] = value
        super().read(schema)


class RawConfig:
    """Configuration options read from layered sources.

    Sources read later override values of sources read earlier. Options not
    set by any source get defaults from `config.yml`, values are cast to the
    type declared there.
    """

    def __init__(
        self,
        sources: Optional[List[ConfigSource]] = None,
        schema: Schema = SCHEMA,
    ):
        self.sources = list(sources or [])
        self.schema = schema
        self._locked = False

    def read(
        self,
        sources: List[ConfigSource],
        index: Optional[int] = None,
    ) -> None:
        if self._locked:
            raise Exception(
                "Configuration is locked, use `rc.fork()` if you need to "
                "change configuration."
            )
        for source in sources:
            log.info("Reading config from %s.", source.name)
            source.read(self.schema)
        if index is None:
            self.sources.extend(sources)
        else:
            self.sources[index:index] = sources

    def add(self, name: str, params: dict) -> RawConfig:
        self.read([PyDict(name, params)])
        return self

    def fork(self, sources=None) -> RawConfig:
        rc = RawConfig(self.sources, self.schema)
        if isinstance(sources, dict):
            rc.add('fork', sources)
        elif sources:
            rc.read(sources)
        return rc

    def lock(self) -> None:
        self._locked = True

    def get(self, *key: str, origin: bool = False) -> Any:
        option = get_option_schema(self.schema, key)
        for source in reversed(self.sources):
            value = source.get(key)
            if value is not NA:
                name = source.name
                break
        else:
            name = 'default'
            value = option.get('default') if option else None

        if option is not None and value is not None:
            value = cast_option(option, key, value)

        return (value, name) if origin else value

    def getall(self, *prefix: str) -> Iterator[Tuple[Key, Any, str]]:
        """Yield `(key, value, origin)` of options under `prefix`."""
        for key in iter_option_keys(self.schema):
            if key[:len(prefix)] == prefix:
                yield (key,) + self.get(*key, origin=True)

    def get_source_names(self) -> List[str]:
        return [source.name for source in self.sources]

    def dump(self, *names: str, fmt: KeyFormat = KeyFormat.cfg, file=sys.stdout):
        rows = []
        for key, value, origin in self.getall():
            name = '.'.join(key)
            if names and not any(name.startswith(n) for n in names):
                continue
            if fmt == KeyFormat.env:
                name = ENV_PREFIX + '__'.join(key).upper()
            if isinstance(value, list):
                rows += [(origin, f'{name}.{i}', v) for i, v in enumerate(value)]
            else:
                rows.append((origin, name, value))

        header = ('Origin', 'Name', 'Value')
        sizes = [max(len(str(x)) for x in column) for column in zip(header, *rows)]
        table = [header, tuple('-' * s for s in sizes)] + rows
        if file is None:
            return table
        for row in table:
            print('  '.join(str(x).ljust(s) for x, s in zip(row, sizes)), file=file)
