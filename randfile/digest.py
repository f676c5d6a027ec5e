from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.backends import default_backend

from randfile.constants import BLOCK_SIZE


class ContentDigest:
    def __init__(self):
        self.backend = default_backend()
        self._hash = hashes.Hash(hashes.SHA256(), backend=self.backend)
        self._hexdigest = None
        self.bytes_seen = 0

    def update(self, data: bytes) -> None:
        """Feed bytes that were written to the output file."""
        if self._hexdigest is not None:
            raise RuntimeError("Digest already finalized")
        self._hash.update(data)
        self.bytes_seen += len(data)

    def hexdigest(self) -> str:
        """Finalize the SHA-256 and return it as hex. Safe to call repeatedly."""
        if self._hexdigest is None:
            self._hexdigest = self._hash.finalize().hex()
        return self._hexdigest


def file_digest(path) -> str:
    digest = ContentDigest()
    with open(path, "rb") as f:
        for block in iter(lambda: f.read(BLOCK_SIZE), b""):
            digest.update(block)
    return digest.hexdigest()
