from collections import namedtuple

from convdim.core.exceptions import InvalidInput

_LayerBase = namedtuple('Layer', ['filter_size', 'stride', 'padding', 'transposed'])


def _is_int(value):
    # bool is a subclass of int but never a valid size
    return isinstance(value, int) and not isinstance(value, bool)


class Layer(_LayerBase):
    """A single (square) convolutional or transposed convolutional layer.

    Args:
        filter_size (int): kernel height or width
        stride (int): step of the kernel, at least 1
        padding (int): zero padding added on each side
        transposed (bool): whether the layer is a transposed convolution
    """
    __slots__ = ()

    def __new__(cls, filter_size, stride, padding, transposed):
        for name, value in (('filter_size', filter_size), ('stride', stride), ('padding', padding)):
            if not _is_int(value):
                raise InvalidInput(f'{name} must be an integer, got {value!r}')
            if value < 0:
                raise InvalidInput(f'{name} must be non negative, got {value}')
        if stride < 1:
            raise InvalidInput(f'stride must be at least 1, got {stride}')
        if not isinstance(transposed, bool):
            raise InvalidInput(f'transposed must be a boolean, got {transposed!r}')
        return super().__new__(cls, filter_size, stride, padding, transposed)

    @property
    def kind(self):
        return 'transposed' if self.transposed else 'conv'

    def __str__(self):
        return f'{self.kind}(f={self.filter_size},s={self.stride},p={self.padding})'
