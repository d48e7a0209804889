"""RSA key blob decoder."""
from ...config import KeyBlobLayout
from ...exceptions import InvalidBlobSize
from ...logging import get_logger
from ..aes.ctr import AesCtrStream
from .key_material import RSAKeyComponents

logger = get_logger(__name__)


class RSAKeyBlobDecoder:
    """Decrypts an AES-CTR wrapped RSA key blob into its raw fields."""

    def __init__(self, layout: KeyBlobLayout = None):
        """Initializes decoder for a blob layout (the 2048-bit format by default)."""
        self.layout = layout or KeyBlobLayout.default()

    def decode(self, blob: bytes, kek: bytes) -> RSAKeyComponents:
        """
        Decodes an encrypted key blob.

        Args:
            blob: Counter block followed by the encrypted key body
            kek: 16-byte key-encryption-key

        Returns:
            RSAKeyComponents with the d, n and e buffers

        Raises:
            InvalidBlobSize: If blob is not exactly layout.total_size bytes
        """
        layout = self.layout
        if len(blob) != layout.total_size:
            raise InvalidBlobSize(
                f"Encrypted key blob must be {layout.total_size:#x} bytes, got {len(blob):#x}",
                expected=layout.total_size,
                actual=len(blob)
            )

        counter = bytes(blob[:layout.counter_size])
        body = bytes(blob[layout.counter_size:])

        stream = AesCtrStream(body, kek, counter)
        fields = {}
        for name in ('d', 'n', 'e'):
            offset, size = getattr(layout, name)
            stream.seek(offset)
            fields[name] = stream.read(size)

        logger.debug(
            f"Decoded key blob: d={len(fields['d'])} n={len(fields['n'])} e={len(fields['e'])} bytes"
        )
        return RSAKeyComponents(**fields)


def decode_key_blob(blob: bytes, kek: bytes) -> RSAKeyComponents:
    """Decodes a key blob with the default layout."""
    return RSAKeyBlobDecoder().decode(blob, kek)
