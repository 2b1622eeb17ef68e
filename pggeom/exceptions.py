from typing import Optional, Any, Dict, Tuple

import logging
import re


log = logging.getLogger(__name__)


class UnknownValue:

    def __str__(self):
        return '[UNKNOWN]'

    __repr__ = __str__


UNKNOWN_VALUE = UnknownValue()


def resolve_context_vars(schema: Dict[str, str], this: Optional[Any], kwargs: dict):
    """Resolve value from given kwargs and schema."""
    # Extend context by calling get_error_context command on first positional
    # argument, usually a geometry.
    if this is not None:
        from pggeom import commands
        schema = {
            **commands.get_error_context(this),
            **schema,
        }
        kwargs = {**kwargs, 'this': this}

    added = set()
    context = {}
    if this is not None:
        context['component'] = type(this).__module__ + '.' + type(this).__name__
    for k, path in schema.items():
        path = path or k
        name, *names = path.split('.')
        if name not in kwargs:
            continue
        added.add(name)
        value = kwargs
        for name in [name] + names:
            if name.endswith('()'):
                name = name[:-2]
                func = True
            else:
                func = False
            if isinstance(value, dict):
                value = value.get(name)
            elif hasattr(value, name):
                value = getattr(value, name)
            else:
                value = UNKNOWN_VALUE
                break
            if func:
                value = value()
        if value is not UNKNOWN_VALUE:
            context[k] = value

    for k in set(kwargs) - added:
        v = kwargs[k]
        if not isinstance(v, (int, float, str)):
            v = str(v)
        context[k] = v

    # Return sorted context.
    names = [
        'component',
        'geometry',
        'srid',
    ]
    names += [x for x in schema if x not in names]
    names += [x for x in kwargs if x not in names]

    def sort_key(item: Tuple[str, Any]) -> Tuple[int, str]:
        key = item[0]
        try:
            return names.index(key), key
        except ValueError:
            return len(names), key

    return {k: v for k, v in sorted(context.items(), key=sort_key)}


class BaseError(Exception):
    type: str = None
    template: str = None
    context: Dict[str, Any] = {}

    def __init__(self, *args, **kwargs):
        if len(args) == 0:
            this = None
        elif len(args) == 1:
            this = args[0]
        else:
            this = None
            log.error("Only one positional argument is alowed, but %d was given.", len(args), stack_info=True)

        self.type = 'geometry' if this is not None else 'system'

        self.context = resolve_context_vars(self.context, this, kwargs)

    def __str__(self):
        return (
            self.message + '\n' +
            ('  Context:\n' if self.context else '') +
            ''.join(
                f'    {k}: {v}\n'
                for k, v in self.context.items()
            )
        )

    @property
    def message(self):
        try:
            return _render_template(self)
        except KeyError:
            log.exception("Can't render error message for %s.", self.__class__.__name__)
            return self.template


def error_response(error: BaseError):
    return {
        'type': error.type,
        'code': type(error).__name__,
        'template': error.template,
        'context': error.context,
        'message': error.message,
    }


def _render_template(error: BaseError):
    try:
        return error.template.format(**error.context)
    except KeyError:
        context = error.context.copy()
        template_vars_re = re.compile(r'\{(\w+)')
        for match in template_vars_re.finditer(error.template):
            name = match.group(1)
            if name not in context:
                context[name] = UNKNOWN_VALUE
        return error.template.format(**context)


class UserError(BaseError):
    pass


class MalformedInput(UserError, ValueError):
    template = "Error parsing a {expected} out of {text!r}."
    context = {
        'text': None,
        'expected': None,
    }


class UnbalancedDelimiters(MalformedInput):
    template = "Unbalanced {open!r}, {close!r} delimiters in {text!r}."


class UnknownGeometryType(MalformedInput):
    template = "Unknown geometry type in {text!r}."


class InvalidSRID(MalformedInput):
    template = "Invalid SRID {srid!r} in {text!r}."


class IndexOutOfRange(UserError, IndexError):
    template = "Point index {index} is out of range, geometry has {size} points."


class EmptyGeometry(IndexOutOfRange):
    template = "Empty geometry has no points."


class InconsistentGeometry(UserError):
    template = (
        "Geometry is not consistent, all members must share dimension, "
        "measure and SRID."
    )


class MemberIndexOutOfRange(IndexOutOfRange):
    template = "Member index {index} is out of range, geometry has {size} members."


class InvalidConfigValue(UserError):
    template = "Invalid value {value!r} for {name!r} option, expected {type}."
