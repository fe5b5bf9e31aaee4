import unittest

from convdim.core.exceptions import InvalidInput
from convdim.core.layers import Layer


class TestLayer(unittest.TestCase):
    def test_fields(self):
        layer = Layer(filter_size=3, stride=2, padding=1, transposed=True)
        self.assertEqual((layer.filter_size, layer.stride, layer.padding, layer.transposed), (3, 2, 1, True))
        self.assertEqual(layer.kind, 'transposed')
        self.assertEqual(Layer(3, 2, 1, False).kind, 'conv')
        self.assertEqual(str(layer), 'transposed(f=3,s=2,p=1)')

    def test_immutable(self):
        layer = Layer(3, 2, 1, False)
        with self.assertRaises(AttributeError):
            layer.stride = 4

    def test_all_fields_required(self):
        with self.assertRaises(TypeError):
            Layer(3, 2, 1)

    def test_invalid_values(self):
        for args in [(3, 0, 1, False), (-1, 1, 0, False), (3, 1, -1, False),
                     (3, 1, 0, 'no'), (3.5, 1, 0, False), (True, 1, 0, False)]:
            with self.assertRaises(InvalidInput):
                Layer(*args)


if __name__ == '__main__':
    unittest.main()
