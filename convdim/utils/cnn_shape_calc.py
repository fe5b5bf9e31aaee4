"""Output dimension of convolutional and transposed convolutional layers.

Everything is assumed to be symmetric in height and width. If it is not,
compute height and width separately.

Dimensions are non negative integers bounded by ``MAX_DIM`` (unsigned 32 bit).
Division is integer floor division, which is not the same as rounding the
floating point result.
"""
from convdim.core.exceptions import (DimensionOverflow, InvalidFilterSize,
                                     InvalidInput, NegativeOutput)
from convdim.logger import get_module_level_logger

logger = get_module_level_logger(__name__)

MAX_DIM = 2**32 - 1


def _check_arg(name, value, minimum=0):
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidInput(f'{name} must be an integer, got {value!r}')
    if value < minimum:
        raise InvalidInput(f'{name} must be at least {minimum}, got {value}')
    if value > MAX_DIM:
        raise DimensionOverflow(f'{name} ({value}) exceeds the maximum dimension {MAX_DIM}')


def _check_args(in_dim, filter_size, padding, stride, repeat):
    _check_arg('in_dim', in_dim)
    _check_arg('filter_size', filter_size)
    _check_arg('padding', padding)
    _check_arg('stride', stride, minimum=1)
    _check_arg('repeat', repeat)


def _check_filter_fits(in_dim, filter_size, padding):
    if filter_size > in_dim + 2 * padding:
        raise InvalidFilterSize(filter_size, in_dim, padding)


def _check_transposable(in_dim, filter_size, padding, stride):
    if in_dim == 0:
        raise InvalidInput('Input of a transposed convolution must be positive!')
    if (in_dim - 1) * stride + filter_size < 2 * padding:
        raise NegativeOutput(in_dim, filter_size, padding, stride)


def _apply_repeatedly(apply, check, in_dim, stride, repeat):
    """applies `apply` `repeat` times, calling `check` on the dimension before every step.

    The map is monotone, so the sequence of dimensions is monotone too and stops once it
    reaches a fixed point. With stride 1 every step adds the same delta, so steps that
    cannot fail are done in one go.
    """
    out_dim = in_dim
    done = 0
    while done < repeat:
        check(out_dim)
        new_dim = apply(out_dim)
        done += 1
        delta = new_dim - out_dim
        out_dim = _check_result(new_dim)
        if delta == 0:
            break
        if stride == 1:
            if delta > 0:
                skip = repeat - done
            else:
                # every check holds while the dimension is at least 1 - delta
                skip = min(repeat - done, max(0, (out_dim - 1) // -delta - 1))
            out_dim = _check_result(out_dim + skip * delta)
            done += skip
    return out_dim


def _check_result(out_dim):
    if out_dim > MAX_DIM:
        raise DimensionOverflow(f'Output dimension ({out_dim}) exceeds the maximum dimension {MAX_DIM}')
    return out_dim


def conv_output_dim(in_dim, filter_size, padding, stride, repeat=1):
    """calculates out dim of a convolutional layer applied `repeat` times

        o = (n - f + 2*p) // s + 1

    Args:
        in_dim (int): height or width of the input
        filter_size (int): kernel height or width
        padding (int): padding along height or width
        stride (int): stride along height or width
        repeat (int): number of identical layers applied in sequence, 0 returns `in_dim`

    Raises:
        InvalidFilterSize: filter larger than the padded input at any step
        DimensionOverflow: output larger than MAX_DIM

    Returns:
        int
    """
    _check_args(in_dim, filter_size, padding, stride, repeat)
    _check_filter_fits(in_dim, filter_size, padding)

    def apply(n):
        return (n - filter_size + 2 * padding) // stride + 1

    def check(n):
        _check_filter_fits(n, filter_size, padding)

    return _apply_repeatedly(apply, check, in_dim, stride, repeat)


def transposed_conv_output_dim(in_dim, filter_size, padding, stride, repeat=1):
    """calculates out dim of a transposed convolutional layer applied `repeat` times

        o = (n - 1) * s + f - 2*p

    Raises:
        InvalidInput: zero input dimension
        NegativeOutput: padding larger than the expanded input
        DimensionOverflow: output larger than MAX_DIM
    """
    _check_args(in_dim, filter_size, padding, stride, repeat)
    _check_transposable(in_dim, filter_size, padding, stride)

    def apply(n):
        return (n - 1) * stride + filter_size - 2 * padding

    def check(n):
        _check_transposable(n, filter_size, padding, stride)

    return _apply_repeatedly(apply, check, in_dim, stride, repeat)


def layer_output_dim(layer, in_dim, repeat=1):
    if layer.transposed:
        return transposed_conv_output_dim(in_dim, layer.filter_size, layer.padding, layer.stride, repeat)
    return conv_output_dim(in_dim, layer.filter_size, layer.padding, layer.stride, repeat)


def dims_through_layers(layers, in_dim):
    """input dim followed by the output dim of every layer of the chain"""
    _check_arg('in_dim', in_dim)
    dims = [in_dim]
    for i, layer in enumerate(layers):
        dims.append(layer_output_dim(layer, dims[-1]))
        logger.debug(f'layer {i} {layer} : {dims[-2]} -> {dims[-1]}')
    return dims


def dim_after_layers(layers, in_dim):
    """output dim of a chain of layers, each layer feeding the next one.
    An empty chain returns `in_dim`.
    """
    return dims_through_layers(layers, in_dim)[-1]
