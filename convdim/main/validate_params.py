from convdim.core.exceptions import ConflictingOptions, InvalidInput
from convdim.main.options import SINGLE_LAYER_OPTIONS


def check_input_dim(options):
    if options.input_dim <= 0:
        raise InvalidInput(f'Input dimension must be positive, got {options.input_dim}')


def check_layer_options(options):
    if options.layers is not None:
        given = [option for option in SINGLE_LAYER_OPTIONS if getattr(options, option) is not None]
        if given:
            raise ConflictingOptions(f'--layers cannot be combined with : {", ".join(given)}')
    elif options.filter_size is None:
        raise InvalidInput('--filter_size is required when --layers is not given')


def check_options(options):
    check_input_dim(options)
    check_layer_options(options)
