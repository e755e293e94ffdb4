import codecs
from typing import Any, Callable, Optional, Union

import click

Validator = Callable[[click.Context, click.Parameter, Any], Any]


def loader_option(
    *args: Any, validator: Optional[Validator] = None, **kwargs: Any
) -> Callable:
    """Option whose value ends up in the "loader_options" dict, but only when
    it has been set explicitly, so the loader keeps its own default values
    otherwise"""

    def store(
        ctx: click.Context, param: Union[click.Option, click.Parameter], value: Any
    ) -> None:
        assert param.name is not None
        if parameter_is_a_click_default(ctx, param.name):
            return

        if validator is not None:
            value = validator(ctx, param, value)
        ctx.params.setdefault("loader_options", {})[param.name] = value

    return click.option(*args, callback=store, expose_value=False, **kwargs)


def parameter_is_a_click_default(ctx: click.Context, name: str) -> bool:
    return ctx.get_parameter_source(name) in (
        click.core.ParameterSource.DEFAULT,
        click.core.ParameterSource.DEFAULT_MAP,
    )


def known_encoding(ctx: click.Context, param: click.Parameter, value: str) -> str:
    try:
        codecs.lookup(value)
    except LookupError:
        raise click.BadParameter(f"Unknown encoding : {value}") from None

    return value
