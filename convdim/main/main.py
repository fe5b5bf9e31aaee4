"""
Entry point of convdim

prints the output dimension of a single (possibly repeated) layer
or of a chain of layers read from a file
"""
import logging
import sys

from colorama import init

from convdim.core.data.chain_loader import load_layers
from convdim.core.exceptions import ConvDimError, InvalidInput
from convdim.core.utils.misc import error
from convdim.logger import Logger
from convdim.main.options import Options, is_yes, set_defaults
from convdim.main.validate_params import check_options
from convdim.params import params
from convdim.utils.cnn_shape_calc import (conv_output_dim, dim_after_layers,
                                          transposed_conv_output_dim)


def add_handlers(local_logger, options):
    level = logging.DEBUG if is_yes(options.verbose) else logging.WARNING
    local_logger.add_console_handler(params['log']['console_fmt'], level=level)
    if options.log_fullpath:
        try:
            local_logger.add_filehandler(options.log_fullpath, params['log']['file_fmt'], in_json=True)
        except OSError as e:
            raise InvalidInput(f'Cannot write log file {options.log_fullpath} : {e}') from e


def compute(options, logger):
    if options.layers is not None:
        layers = load_layers(options.layers)
        return dim_after_layers(layers, options.input_dim)

    if options.deconv:
        calc = transposed_conv_output_dim
    else:
        calc = conv_output_dim
    logger.debug(f'{calc.__name__}(in_dim={options.input_dim}, filter_size={options.filter_size}, '
                 f'padding={options.padding}, stride={options.stride}, repeat={options.repeat})')
    return calc(options.input_dim, options.filter_size, options.padding, options.stride, options.repeat)


def main(args=None):
    options = Options().parse(args)
    logger = Logger('convdim')
    try:
        add_handlers(logger, options)
        check_options(options)
        set_defaults(options, params)
        out_dim = compute(options, logger)
        logger.info(f'output dimension : {out_dim}')
    except ConvDimError as e:
        logger.debug(f'{e.__class__.__name__} : {e}')
        print(error(f'{e.__class__.__name__}: {e}'), file=sys.stderr)
        return 1
    finally:
        logger.cleanup()
    print(out_dim)
    return 0


def run():
    init()  # colorama
    sys.exit(main())


if __name__ == '__main__':
    run()
