"""Errors raised while computing layer output dimensions"""


class ConvDimError(Exception):
    """base class of every error reported by convdim"""


class InvalidFilterSize(ConvDimError, ValueError):
    """filter does not fit in the padded input"""
    def __init__(self, filter_size, in_dim, padding):
        self.filter_size = filter_size
        self.in_dim = in_dim
        self.padding = padding
        super().__init__(f'Filter size ({filter_size}) is larger than input ({in_dim}) '
                         f'with padding ({padding})!')


class InvalidInput(ConvDimError, ValueError):
    pass


class NegativeOutput(ConvDimError, ValueError):
    """transposed convolution would produce a negative dimension"""
    def __init__(self, in_dim, filter_size, padding, stride):
        self.in_dim = in_dim
        super().__init__(f'Transposed convolution of input ({in_dim}) with filter size ({filter_size}), '
                         f'stride ({stride}) and padding ({padding}) gives a negative output!')


class DimensionOverflow(ConvDimError, OverflowError):
    pass


class MalformedChainDescription(ConvDimError, ValueError):
    pass


class ConflictingOptions(ConvDimError, ValueError):
    pass
