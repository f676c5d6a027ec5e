import hashlib

from randfile.digest import ContentDigest, file_digest


def test_digest_matches_sha256():
    digest = ContentDigest()
    digest.update(b"hello ")
    digest.update(b"world")
    assert digest.bytes_seen == 11
    assert digest.hexdigest() == hashlib.sha256(b"hello world").hexdigest()
    # finalized value is cached
    assert digest.hexdigest() == hashlib.sha256(b"hello world").hexdigest()


def test_empty_digest():
    assert ContentDigest().hexdigest() == hashlib.sha256(b"").hexdigest()


def test_file_digest(tmp_path):
    path = tmp_path / "data"
    payload = bytes(range(256)) * 40
    path.write_bytes(payload)
    assert file_digest(path) == hashlib.sha256(payload).hexdigest()
