"""
Unit tests for the versioned archive format.
"""
import io

import pytest
from pointgeom.core.errors import ArchiveError
from pointgeom.geometry import Point2, Point3, StereoPoint2
from pointgeom.io.archive import ARCHIVE_VERSION, FIELDS, encode, decode, dump_yaml, load_yaml


class TestEncodeDecode:
    """Tests for record encoding."""

    def test_field_order(self):
        assert list(encode(Point2(1, 2))) == ['type', 'version', 'x', 'y']
        assert list(encode(Point3(1, 2, 3))) == ['type', 'version', 'x', 'y', 'z']
        assert list(encode(StereoPoint2(10, 8, 5))) == ['type', 'version', 'uL', 'uR', 'v']

    def test_record_values(self):
        record = encode(StereoPoint2(10, 8, 5))
        assert record == {'type': 'StereoPoint2', 'version': ARCHIVE_VERSION,
                          'uL': 10.0, 'uR': 8.0, 'v': 5.0}

    @pytest.mark.parametrize("p", [Point2(1.5, -2), Point3(0.1, 0.2, 0.3), StereoPoint2(320, 300.5, 240)])
    def test_decode_encoded(self, p):
        assert decode(encode(p)) == p

    def test_fields_table(self):
        assert FIELDS['Point3'] == ('x', 'y', 'z')

    def test_encode_unknown_type(self):
        with pytest.raises(ArchiveError):
            encode((1.0, 2.0))

    def test_decode_unknown_type(self):
        with pytest.raises(ArchiveError, match="Unknown archive type"):
            decode({'type': 'Pose3', 'version': 1})

    def test_decode_unhashable_type(self):
        with pytest.raises(ArchiveError, match="Unknown archive type"):
            decode({'type': [1], 'version': 1})

    def test_decode_wrong_version(self):
        with pytest.raises(ArchiveError, match="version"):
            decode({'type': 'Point2', 'version': 99, 'x': 1.0, 'y': 2.0})

    def test_decode_reordered_fields(self):
        with pytest.raises(ArchiveError, match="fields"):
            decode({'type': 'Point2', 'version': 1, 'y': 2.0, 'x': 1.0})

    def test_decode_renamed_field(self):
        with pytest.raises(ArchiveError):
            decode({'type': 'StereoPoint2', 'version': 1, 'uL': 1.0, 'ur': 2.0, 'v': 3.0})

    def test_decode_non_numeric(self):
        with pytest.raises(ArchiveError):
            decode({'type': 'Point2', 'version': 1, 'x': 'a', 'y': 2.0})

    def test_decode_not_mapping(self):
        with pytest.raises(ArchiveError):
            decode(['Point2', 1, 1.0, 2.0])


class TestYaml:
    """Tests for YAML persistence."""

    def test_dump_keeps_field_order(self):
        text = dump_yaml([StereoPoint2(10, 8, 5)])
        assert text.index('uL:') < text.index('uR:') < text.index('v:')

    def test_dump_and_load_stream(self):
        points = [Point2(1, 2), Point3(1, 2, 3), StereoPoint2(10, 8, 5)]
        buffer = io.StringIO()
        dump_yaml(points, buffer)
        buffer.seek(0)
        assert load_yaml(buffer) == points

    def test_load_empty(self):
        assert load_yaml("") == []

    def test_load_not_a_list(self):
        with pytest.raises(ArchiveError):
            load_yaml("type: Point2\n")

    def test_load_unhashable_type(self):
        with pytest.raises(ArchiveError):
            load_yaml("- type: [1]\n")

    def test_load_malformed(self):
        with pytest.raises(ArchiveError):
            load_yaml("- [unclosed")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
