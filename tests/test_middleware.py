import hashlib
import logging

import pytest

from roadcodec_core.errors import (
    ChecksumMismatchError,
    CorruptPayloadError,
    MissingAttributeError,
    UnsupportedAlgorithmError,
    UnsupportedVersionError,
)
from roadcodec_core.middleware.codec import PayloadCodecMiddleware
from roadcodec_core.protocol import attributes as attrs
from roadcodec_core.protocol.algorithms import (
    ChecksumAlgorithm,
    CompressionAlgorithm,
    EncodingAlgorithm,
)
from roadcodec_core.protocol.codec import CodecConfiguration
from roadcodec_core.queue.message import Message, MessageAttributeValue

BODY = '{"value":42}'


def middleware(compression=CompressionAlgorithm.ZSTD,
               encoding=EncodingAlgorithm.NONE,
               checksum=ChecksumAlgorithm.MD5,
               **kwargs):
    configuration = CodecConfiguration(compression, encoding, checksum)
    return PayloadCodecMiddleware(configuration, **kwargs)


def test_encode_writes_metadata():

    raw = BODY.encode('utf-8')
    message = Message.create(BODY, attributes={'shopId': 'shop-1'})

    encoded = middleware().encode_message(message)

    assert encoded.body != BODY
    assert encoded.id == message.id
    assert encoded.attribute(attrs.COMPRESSION_ALG) == 'zstd'
    assert encoded.attribute(attrs.ENCODING_ALG) == 'base64'
    assert encoded.attribute(attrs.CHECKSUM_ALG) == 'md5'
    assert encoded.attribute(attrs.CHECKSUM) == hashlib.md5(raw).hexdigest()
    assert encoded.attribute(attrs.RAW_LENGTH) == str(len(raw))
    assert encoded.attributes[attrs.VERSION] == MessageAttributeValue.number(1)
    assert encoded.attribute('shopId') == 'shop-1'


def test_encode_does_not_touch_input():

    message = Message.create(BODY, attributes={'shopId': 'shop-1'})

    middleware().encode_message(message)

    assert message.body == BODY
    assert set(message.attributes) == {'shopId'}


def test_round_trip_restores_body():

    codec = middleware()
    message = Message.create(BODY, attributes={'shopId': 'shop-1'})

    decoded = codec.decode_message(codec.encode_message(message))

    assert decoded.body == BODY
    assert decoded.attribute('shopId') == 'shop-1'
    assert decoded.attribute(attrs.COMPRESSION_ALG) == 'zstd'


@pytest.mark.parametrize('compression', list(CompressionAlgorithm))
@pytest.mark.parametrize('encoding', list(EncodingAlgorithm))
@pytest.mark.parametrize('checksum', list(ChecksumAlgorithm))
def test_round_trip_all_configurations(compression, encoding, checksum):

    codec = middleware(compression, encoding, checksum)
    body = 'ünïcödé ✓ ' * 30

    encoded = codec.encode_message(Message.create(body))

    assert encoded.attribute(attrs.RAW_LENGTH) == str(len(body.encode('utf-8')))
    assert codec.decode_message(encoded).body == body


def test_plain_text_passthrough_encoding():

    codec = middleware(CompressionAlgorithm.NONE, EncodingAlgorithm.NONE, ChecksumAlgorithm.NONE)

    encoded = codec.encode_message(Message.create(BODY))

    assert encoded.body == BODY
    assert encoded.attribute(attrs.ENCODING_ALG) == 'none'
    assert encoded.attribute(attrs.CHECKSUM) is None


def test_encode_skips_transformed_message():

    message = Message.create(BODY, attributes={attrs.ENCODING_ALG: 'base64'})

    assert middleware().encode_message(message) is message


def test_encode_ignores_blank_codec_attribute():

    message = Message.create(BODY, attributes={attrs.COMPRESSION_ALG: ''})

    encoded = middleware().encode_message(message)

    assert encoded.attribute(attrs.COMPRESSION_ALG) == 'zstd'


def test_encode_drops_stale_checksum_attributes():

    stale = {attrs.CHECKSUM_ALG: 'md5', attrs.CHECKSUM: 'deadbeef', 'shopId': 'shop-1'}
    sender = middleware(checksum=ChecksumAlgorithm.NONE)

    encoded = sender.encode_message(Message.create(BODY, attributes=stale))

    assert encoded.attribute(attrs.CHECKSUM_ALG) is None
    assert encoded.attribute(attrs.CHECKSUM) is None
    assert encoded.attribute('shopId') == 'shop-1'
    assert middleware(checksum=ChecksumAlgorithm.NONE).decode_message(encoded).body == BODY


def test_encode_replaces_stale_checksum_value():

    raw = BODY.encode('utf-8')
    stale = {attrs.CHECKSUM_ALG: 'md5', attrs.CHECKSUM: 'deadbeef'}
    codec = middleware(checksum=ChecksumAlgorithm.SHA256)

    encoded = codec.encode_message(Message.create(BODY, attributes=stale))

    assert encoded.attribute(attrs.CHECKSUM_ALG) == 'sha256'
    assert encoded.attribute(attrs.CHECKSUM) == hashlib.sha256(raw).hexdigest()
    assert codec.decode_message(encoded).body == BODY


def test_encode_is_idempotent():

    codec = middleware()
    once = codec.encode_message(Message.create(BODY))

    assert codec.encode_message(once) is once


def test_encode_batch_entries_are_independent():

    codec = middleware()
    done = codec.encode_message(Message.create('first'))
    fresh = Message.create('second')

    first, second = codec.encode_batch([done, fresh])

    assert first is done
    assert second.attribute(attrs.COMPRESSION_ALG) == 'zstd'
    assert [m.body for m in codec.decode_batch([first, second])] == ['first', 'second']


def test_decode_passes_untransformed_message_through():

    message = Message.create(BODY, attributes={'shopId': 'shop-1'})

    decoded = middleware().decode_message(message)

    assert decoded is message
    assert decoded.body == BODY
    assert set(decoded.attributes) == {'shopId'}


def test_decode_partial_metadata():

    message = Message.create('payload', attributes={attrs.COMPRESSION_ALG: 'zstd'})

    with pytest.raises(MissingAttributeError) as caught:
        middleware().decode_message(message)

    assert caught.value.attribute == attrs.ENCODING_ALG


def test_decode_tampered_checksum():

    codec = middleware()
    encoded = codec.encode_message(Message.create(BODY))
    attributes = dict(encoded.attributes)
    attributes[attrs.CHECKSUM] = MessageAttributeValue.string(hashlib.md5(b'other').hexdigest())

    with pytest.raises(ChecksumMismatchError):
        codec.decode_message(encoded.with_body(encoded.body, attributes))


def test_decode_tampered_body():

    codec = middleware(CompressionAlgorithm.NONE, EncodingAlgorithm.NONE)
    encoded = codec.encode_message(Message.create(BODY))

    with pytest.raises(ChecksumMismatchError):
        codec.decode_message(encoded.with_body('{"value":43}'))


def test_decode_corrupt_body():

    codec = middleware()
    encoded = codec.encode_message(Message.create(BODY))

    with pytest.raises(CorruptPayloadError):
        codec.decode_message(encoded.with_body('!!!'))


def test_decode_rejects_other_checksum_algorithm():

    sender = middleware(checksum=ChecksumAlgorithm.MD5)
    receiver = middleware(checksum=ChecksumAlgorithm.SHA256)

    with pytest.raises(UnsupportedAlgorithmError):
        receiver.decode_message(sender.encode_message(Message.create(BODY)))


def test_decode_requires_checksum_when_enabled():

    sender = middleware(checksum=ChecksumAlgorithm.NONE)
    receiver = middleware(checksum=ChecksumAlgorithm.MD5)

    with pytest.raises(MissingAttributeError) as caught:
        receiver.decode_message(sender.encode_message(Message.create(BODY)))

    assert caught.value.attribute == attrs.CHECKSUM_ALG


def test_decode_without_checksum_ignores_stored_digest():

    sender = middleware(checksum=ChecksumAlgorithm.SHA256)
    receiver = middleware(checksum=ChecksumAlgorithm.NONE)

    assert receiver.decode_message(sender.encode_message(Message.create(BODY))).body == BODY


def test_decode_uses_message_metadata_not_receiver_configuration():

    sender = middleware(CompressionAlgorithm.GZIP, EncodingAlgorithm.BASE64_STD)
    receiver = middleware(CompressionAlgorithm.SNAPPY, EncodingAlgorithm.BASE64_URL)

    assert receiver.decode_message(sender.encode_message(Message.create(BODY))).body == BODY


def test_decode_unsupported_version():

    codec = middleware()
    encoded = codec.encode_message(Message.create(BODY))
    attributes = dict(encoded.attributes)
    attributes[attrs.VERSION] = MessageAttributeValue.number(2)

    with pytest.raises(UnsupportedVersionError):
        codec.decode_message(encoded.with_body(encoded.body, attributes))


def test_decode_legacy_message_without_version():

    codec = middleware()
    encoded = codec.encode_message(Message.create(BODY))
    attributes = dict(encoded.attributes)
    del attributes[attrs.VERSION]

    assert codec.decode_message(encoded.with_body(encoded.body, attributes)).body == BODY


def test_decode_strips_attributes_when_asked():

    codec = middleware(strip_attributes=True)
    encoded = codec.encode_message(Message.create(BODY, attributes={'shopId': 'shop-1'}))

    decoded = codec.decode_message(encoded)

    assert decoded.body == BODY
    assert set(decoded.attributes) == {'shopId'}


def test_decode_failure_is_logged(caplog):

    message = Message.create('payload', attributes={attrs.ENCODING_ALG: 'base64'})

    with caplog.at_level(logging.WARNING, logger='roadcodec_core.middleware.codec'):
        with pytest.raises(MissingAttributeError):
            middleware().decode_message(message)

    assert message.id in caplog.text


def test_hooks_delegate_to_codec():

    codec = middleware()
    sent = codec.on_send(Message.create(BODY))

    assert sent.attribute(attrs.COMPRESSION_ALG) == 'zstd'
    assert codec.on_receive(sent).body == BODY
