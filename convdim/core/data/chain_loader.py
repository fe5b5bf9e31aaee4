"""Loads a chain of layers from a json or yaml description

    {"layers": [{"filter_size": 2, "stride": 2, "padding": 0, "transposed": false}, ...]}

every field of every layer is required.
"""
import json
import os

import yaml

from convdim.core.exceptions import InvalidInput, MalformedChainDescription
from convdim.core.layers import Layer
from convdim.logger import get_module_level_logger

logger = get_module_level_logger(__name__)

LAYER_FIELDS = ('filter_size', 'stride', 'padding', 'transposed')
YAML_EXTENSIONS = ('.yml', '.yaml')


def _read_description(path):
    ext = os.path.splitext(path)[1].lower()
    try:
        with open(path, 'r', encoding='utf-8') as file:
            if ext in YAML_EXTENSIONS:
                return yaml.safe_load(file)
            return json.load(file)
    except OSError as e:
        raise MalformedChainDescription(f'Cannot read chain description {path} : {e}') from e
    except (UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise MalformedChainDescription(f'Cannot parse chain description {path} : {e}') from e


def _layer_from_record(index, record):
    if not isinstance(record, dict):
        raise MalformedChainDescription(f'layer {index} must be a mapping, got {type(record).__name__}')
    missing = [field for field in LAYER_FIELDS if field not in record]
    if missing:
        raise MalformedChainDescription(f'layer {index} is missing {", ".join(missing)}')
    unknown = [key for key in record if key not in LAYER_FIELDS]
    if unknown:
        logger.warning(f'layer {index} : ignoring unknown keys {", ".join(map(str, unknown))}')
    try:
        return Layer(**{field: record[field] for field in LAYER_FIELDS})
    except InvalidInput as e:
        raise MalformedChainDescription(f'layer {index} : {e}') from e


def layers_from_dict(description):
    """builds the ordered list of layers from an already parsed description

    Raises:
        MalformedChainDescription: on any missing or mistyped field, no partial chain is returned
    """
    if not isinstance(description, dict) or 'layers' not in description:
        raise MalformedChainDescription("chain description must be a mapping with a 'layers' key")
    records = description['layers']
    if not isinstance(records, list):
        raise MalformedChainDescription(f"'layers' must be a list, got {type(records).__name__}")
    return [_layer_from_record(i, record) for i, record in enumerate(records)]


def load_layers(path):
    description = _read_description(path)
    layers = layers_from_dict(description)
    logger.debug(f'loaded {len(layers)} layers from {path}')
    return layers
