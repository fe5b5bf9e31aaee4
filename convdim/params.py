import json
import os

from convdim.logger import get_module_level_logger

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
logger = get_module_level_logger(__name__)


class Params:
    def __init__(self):
        self.vals = {}

    def _update_vals_from_dict(self, d: dict):
        self.vals = d

    @classmethod
    def from_json(cls, json_file_fullpath):
        with open(json_file_fullpath, 'r') as file:
            configs = json.load(file)
            obj = cls()
            obj._update_vals_from_dict(configs)
            return obj

    def __getitem__(self, item):
        if item not in self.vals:
            logger.error(f'{self.__class__.__name__} object has no key called {item}')
            raise KeyError(f'No key called {item}')
        return self.vals[item]

    def __contains__(self, item):
        return item in self.vals

    def set(self, key, val):
        if key in self.vals:
            logger.warning(f'updating existing value of {key} with value {self.vals[key]} to {val}')
        self.vals[key] = val


#Singleton Object
params = Params.from_json(os.path.join(BASE_DIR, 'params.json'))
