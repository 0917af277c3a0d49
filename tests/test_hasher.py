"""
Unit tests for HasherImpl with XXH3HashAlgorithmImpl.
Verifies streaming digests are deterministic 64-bit xxHash3 values.
"""
import io
from unittest import mock

import pytest
import xxhash

from firstseen.core.errors import HashIOError
from firstseen.core.hasher import HasherImpl, XXH3HashAlgorithmImpl


class TestXXH3HashAlgorithmImpl:
    """Test the streaming primitive in isolation."""

    def test_chunked_updates_match_one_shot_digest(self):
        algorithm = XXH3HashAlgorithmImpl()
        algorithm.reset()
        algorithm.update(b"hello ")
        algorithm.update(b"world")
        assert algorithm.finalize() == xxhash.xxh3_64_intdigest(b"hello world")

    def test_reset_discards_previous_state(self):
        algorithm = XXH3HashAlgorithmImpl()
        algorithm.update(b"garbage")
        algorithm.reset()
        algorithm.update(b"data")
        assert algorithm.finalize() == xxhash.xxh3_64_intdigest(b"data")

    def test_empty_input_digest(self):
        algorithm = XXH3HashAlgorithmImpl()
        algorithm.reset()
        assert algorithm.finalize() == xxhash.xxh3_64_intdigest(b"")


class TestHasherImpl:
    """Test digest computation with chunk-based reading."""

    def test_same_content_produces_same_digest(self, tmp_path):
        """Identical files must produce identical digests."""
        content = b"test content " * 1000
        first = tmp_path / "first.bin"
        second = tmp_path / "second.bin"
        first.write_bytes(content)
        second.write_bytes(content)

        hasher = HasherImpl(XXH3HashAlgorithmImpl())
        digest1 = hasher.compute_digest(first)
        digest2 = hasher.compute_digest(second)

        assert digest1 == digest2
        assert isinstance(digest1, int)
        assert 0 <= digest1 < 2 ** 64

    def test_hashing_same_file_twice_is_deterministic(self, tmp_path):
        target = tmp_path / "file.bin"
        target.write_bytes(b"xyz" * 5000)

        hasher = HasherImpl()
        assert hasher.compute_digest(target) == hasher.compute_digest(target)

    def test_different_content_produces_different_digests(self, tmp_path):
        first = tmp_path / "a.bin"
        second = tmp_path / "b.bin"
        first.write_bytes(b"A" * 1024)
        second.write_bytes(b"B" * 1024)

        hasher = HasherImpl()
        assert hasher.compute_digest(first) != hasher.compute_digest(second)

    @pytest.mark.parametrize("chunk_size", [1, 7, 128, 64 * 1024])
    def test_digest_does_not_depend_on_chunk_size(self, tmp_path, chunk_size):
        """Streaming must produce the whole-content digest for any buffer size."""
        content = bytes(range(256)) * 300
        target = tmp_path / "data.bin"
        target.write_bytes(content)

        hasher = HasherImpl(chunk_size=chunk_size)
        assert hasher.compute_digest(target) == xxhash.xxh3_64_intdigest(content)

    def test_file_digest_matches_bytes_digest(self, tmp_path):
        content = b"0123456789" * 100
        target = tmp_path / "data.bin"
        target.write_bytes(content)

        hasher = HasherImpl(chunk_size=16)
        assert hasher.compute_digest(target) == hasher.compute_bytes_digest(content)

    def test_last_bytes_read_tracks_file_size(self, tmp_path):
        target = tmp_path / "sized.bin"
        target.write_bytes(b"z" * 1000)

        hasher = HasherImpl(chunk_size=64)
        hasher.compute_digest(target)
        assert hasher.last_bytes_read == 1000

    def test_empty_file_is_hashed(self, tmp_path):
        target = tmp_path / "empty"
        target.write_bytes(b"")
        assert HasherImpl().compute_digest(target) == xxhash.xxh3_64_intdigest(b"")

    def test_missing_file_raises_hash_io_error(self, tmp_path):
        missing = tmp_path / "deleted.txt"

        with pytest.raises(HashIOError) as excinfo:
            HasherImpl().compute_digest(missing)

        assert excinfo.value.path == str(missing)
        assert str(missing) in str(excinfo.value)

    def test_directory_raises_hash_io_error(self, tmp_path):
        with pytest.raises(HashIOError):
            HasherImpl().compute_digest(tmp_path)

    def test_read_failure_mid_stream_raises_hash_io_error(self, tmp_path):
        """A read error after some data was consumed is still a HashIOError."""
        target = tmp_path / "flaky.bin"
        target.write_bytes(b"payload")

        class FlakyStream(io.BytesIO):
            def __init__(self):
                super().__init__(b"x" * 10)
                self.calls = 0

            def read(self, size=-1):
                self.calls += 1
                if self.calls > 1:
                    raise OSError(5, "Input/output error")
                return super().read(size)

        with mock.patch("builtins.open", return_value=FlakyStream()):
            with pytest.raises(HashIOError, match="Input/output error"):
                HasherImpl(chunk_size=4).compute_digest(target)

    def test_invalid_chunk_size_rejected(self):
        with pytest.raises(ValueError):
            HasherImpl(chunk_size=0)
