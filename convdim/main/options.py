import argparse

SINGLE_LAYER_OPTIONS = ('filter_size', 'padding', 'stride', 'repeat', 'deconv')


class Options():
    def __init__(self):
        self.parser = argparse.ArgumentParser(prog='convdim',
                                              formatter_class=argparse.ArgumentDefaultsHelpFormatter,
                                              description='Compute the output dimension of convolutional layers. '
                                                          'The input is assumed to be square, run the program twice '
                                                          'with the height and the width otherwise.')

        self.parser.add_argument('--input_dim', '--input-dim', '-i',
                                 type=int,
                                 help='dimension of the input',
                                 required=True)

        self.parser.add_argument('--filter_size', '--filter-size', '-f',
                                 type=int,
                                 help='filter size, required unless --layers is given')

        self.parser.add_argument('--padding', '-p',
                                 type=int,
                                 help='zero padding used for the filter (default from params.json : 0)')

        self.parser.add_argument('--stride', '-s',
                                 type=int,
                                 help='stride used for the filter (default from params.json : 1)')

        self.parser.add_argument('--repeat', '-r',
                                 type=int,
                                 help='number of times the layer is applied (default from params.json : 1)')

        self.parser.add_argument('--deconv', '-d',
                                 action='store_const',
                                 const=True,
                                 help='the layer is a transposed (deconvolutional) layer')

        self.parser.add_argument('--layers', '-l',
                                 type=str,
                                 help='json or yaml file describing a chain of layers')

        self.parser.add_argument('--verbose', '-v',
                                 default='n',
                                 choices=['y', 'n', 'yes', 'no'],
                                 type=str,
                                 help='whether to log every layer on stderr')

        self.parser.add_argument('--log_fullpath',
                                 type=str,
                                 help='file where json log records are also written')

    def parse(self, args=None):
        return self.parser.parse_args(args)


def is_yes(value):
    return value in ('y', 'yes')


def set_defaults(options, params):
    """fills the single layer options that were not given with the defaults of params"""
    defaults = params['defaults']
    for key in ('padding', 'stride', 'repeat'):
        if getattr(options, key) is None:
            setattr(options, key, defaults[key])
    if options.deconv is None:
        options.deconv = False
