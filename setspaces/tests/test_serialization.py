import io
import json
import os
import tempfile
from unittest import TestCase

import torch
from addict import Dict
from setspaces import SpaceCodec, DeserializationError
from setspaces.spaces import Binary, Discrete, Naturals, Card, Space, union, intersection
from setspaces.serialization import FieldPairs, to_record, from_record, loads_record
from setspaces import serialization


class TestRecords(TestCase):
    def test_to_record(self):
        assert to_record(Discrete(5)) == {'size': 5}
        assert to_record(Binary()) == {}
        assert to_record(Naturals()) == {}

    def test_discrete_roundtrip(self):
        for size in [0, 1, 5, 10, 100]:
            space = from_record(Discrete, to_record(Discrete(size)))
            assert space == Discrete(size), "Expected {} to equal {}".format(space, Discrete(size))
            assert space.sup() == Discrete(size).sup()
            assert list(space) == list(range(size))

    def test_positional_record(self):
        assert from_record(Discrete, [4]) == Discrete(4)
        assert from_record(Discrete, (4,)) == Discrete(4)
        with self.assertRaises(DeserializationError) as ctx:
            from_record(Discrete, [])
        assert ctx.exception.kind == 'invalid_length'
        with self.assertRaises(DeserializationError) as ctx:
            from_record(Discrete, [1, 2])
        assert ctx.exception.kind == 'invalid_length'

    def test_missing_field(self):
        with self.assertRaises(DeserializationError) as ctx:
            from_record(Discrete, {})
        assert ctx.exception.kind == 'missing_field'
        assert ctx.exception.field == 'size'
        assert 'missing field `size`' in str(ctx.exception)

    def test_duplicate_field(self):
        with self.assertRaises(DeserializationError) as ctx:
            from_record(Discrete, FieldPairs([('size', 3), ('size', 4)]))
        assert ctx.exception.kind == 'duplicate_field'
        assert ctx.exception.field == 'size'

        with self.assertRaises(DeserializationError) as ctx:
            loads_record(Discrete, '{"size": 3, "size": 3}')
        assert ctx.exception.kind == 'duplicate_field'

    def test_unknown_field(self):
        with self.assertRaises(DeserializationError) as ctx:
            from_record(Discrete, {'size': 3, 'range': [0, 3]})
        assert ctx.exception.kind == 'unknown_field'
        assert ctx.exception.field == 'range'
        assert ctx.exception.expected == ('size',)

        with self.assertRaises(DeserializationError) as ctx:
            from_record(Binary, {'size': 3})
        assert ctx.exception.kind == 'unknown_field'

    def test_invalid_value(self):
        for record in [{'size': -1}, {'size': 2.5}, {'size': '3'}, [None]]:
            with self.assertRaises(DeserializationError) as ctx:
                from_record(Discrete, record)
            assert ctx.exception.kind == 'invalid_value'
            assert isinstance(ctx.exception, ValueError)

    def test_invalid_type(self):
        with self.assertRaises(DeserializationError) as ctx:
            from_record(Discrete, 3)
        assert ctx.exception.kind == 'invalid_type'

    def test_unit_records(self):
        for cls in [Binary, Naturals]:
            assert from_record(cls, {}) == cls()
            assert from_record(cls, []) == cls()
            assert from_record(cls, None) == cls()

    def test_loads_record(self):
        assert loads_record(Discrete, '{"size": 6}') == Discrete(6)
        assert loads_record(Discrete, '[6]') == Discrete(6)
        with self.assertRaises(DeserializationError) as ctx:
            loads_record(Discrete, '{}')
        assert ctx.exception.kind == 'missing_field'


class TestSpaceCodec(TestCase):
    def test_encode(self):
        codec = SpaceCodec()
        assert codec.encode(Discrete(3)) == {'type': 'Discrete', 'size': 3}
        assert codec.encode(Binary()) == {'type': 'Binary'}
        assert isinstance(codec.encode(Naturals()), Dict)
        document = codec.encode(union(Binary(), Naturals()))
        assert document.left.type == 'Binary'
        assert document.right.type == 'Naturals'

    def test_roundtrip(self):
        codec = SpaceCodec()
        spaces = [
            Binary(),
            Discrete(0),
            Discrete(7),
            Naturals(),
            union(Discrete(3), Discrete(4)),
            intersection(Discrete(3), Naturals()),
            union(intersection(Naturals(), Discrete(2)), Binary()),
        ]
        for space in spaces:
            decoded = codec.decode(codec.encode(space))
            assert decoded == space, "Expected {} to equal {}".format(decoded, space)
            decoded = codec.loads(codec.dumps(space))
            assert decoded == space, "Expected {} to equal {}".format(decoded, space)
            assert decoded.card() == space.card()

    def test_config(self):
        codec = SpaceCodec(type_key='kind', sort_keys=True)
        assert codec.encode(Discrete(2)) == {'kind': 'Discrete', 'size': 2}
        assert json.loads(codec.dumps(Discrete(2))) == {'kind': 'Discrete', 'size': 2}
        assert codec.loads('{"kind": "Discrete", "size": 2}') == Discrete(2)

        codec = SpaceCodec(config=Dict(json_indent=2))
        assert '\n' in codec.dumps(Discrete(2))

    def test_decode_errors(self):
        codec = SpaceCodec()
        document_kind_tuples = [
            ('{"size": 3}', 'missing_field'),
            ('{"type": "Discrete"}', 'missing_field'),
            ('{"type": "Discrete", "size": 3, "size": 3}', 'duplicate_field'),
            ('{"type": "Discrete", "type": "Discrete", "size": 3}', 'duplicate_field'),
            ('{"type": "Discrete", "size": 3, "n": 3}', 'unknown_field'),
            ('{"type": "Box", "low": 0}', 'unknown_type'),
            ('{"type": 3}', 'invalid_value'),
            ('[3]', 'invalid_type'),
            ('{"type": "Union", "left": {"type": "Binary"}}', 'missing_field'),
            ('{"type": "Union", "left": {"type": "Binary"}, "right": {"type": "Discrete", "size": -2}}',
             'invalid_value'),
        ]
        for document, kind in document_kind_tuples:
            with self.assertRaises(DeserializationError) as ctx:
                codec.loads(document)
            assert ctx.exception.kind == kind, "Expected {} to fail with {}, got {}".format(
                document, kind, ctx.exception.kind)

    def test_as_part_of_a_config_document(self):
        config = Dict()
        config.agent.action_space = serialization.encode(Discrete(4))
        config.agent.observation_space = serialization.encode(Naturals())
        text = json.dumps(config)
        loaded = json.loads(text)
        assert serialization.decode(loaded['agent']['action_space']) == Discrete(4)
        assert serialization.decode(loaded['agent']['observation_space']) == Naturals()

    def test_register(self):
        class Trinary(Discrete):
            FIELDS = ()

            def __init__(self):
                super(Trinary, self).__init__(3)

        codec = SpaceCodec()
        with self.assertRaises(TypeError):
            codec.encode(Trinary())
        codec.register(Trinary)
        assert codec.encode(Trinary()) == {'type': 'Trinary'}
        assert codec.decode({'type': 'Trinary'}) == Discrete(3)
        with self.assertRaises(ValueError):
            codec.register(Trinary, name='Union')

    def test_register_bad_classes(self):
        class Quaternary(Space):
            def card(self):
                return Card.Finite(4)

        codec = SpaceCodec()
        for cls in [int, Discrete(3), "Discrete", Quaternary]:
            with self.assertRaises(TypeError):
                codec.register(cls)
        assert "int" not in codec.space_types and "Quaternary" not in codec.space_types

    def test_save_load(self):
        codec = SpaceCodec()
        with tempfile.TemporaryDirectory() as directory:
            for idx, space in enumerate([Discrete(5), Binary(), Naturals(), union(Discrete(2), Binary())]):
                filepath = os.path.join(directory, 'space_{:03d}.pickle'.format(idx))
                codec.save(space, filepath)
                loaded = codec.load(filepath)
                assert loaded == space, "Expected {} to equal {}".format(loaded, space)

    def test_torch_save_rebuilds_derived_state(self):
        buffer = io.BytesIO()
        torch.save(Discrete(9), buffer)
        buffer.seek(0)
        space = torch.load(buffer, weights_only=False)
        assert space == Discrete(9)
        assert space.sup() == 8
        assert space.sample(torch.Generator().manual_seed(0)) in range(9)
