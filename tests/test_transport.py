import pytest

from roadcodec_core import (
    ChecksumAlgorithm,
    CodecConfiguration,
    CompressionAlgorithm,
    EncodingAlgorithm,
    InMemoryTransport,
    Message,
    MissingAttributeError,
    PayloadCodecMiddleware,
    Pipeline,
)
from roadcodec_core.middleware.pipeline import BaseMiddleware
from roadcodec_core.protocol import attributes as attrs


@pytest.fixture
def transport():

    configuration = CodecConfiguration(
        CompressionAlgorithm.ZSTD, EncodingAlgorithm.NONE, ChecksumAlgorithm.MD5)
    pipeline = Pipeline([PayloadCodecMiddleware(configuration)])
    return InMemoryTransport(pipeline)


def test_send_receive_round_trip(transport):

    payload = '{"value":42}'
    transport.send('orders', Message.create(payload, attributes={'shopId': 'shop-1'}))

    wire, = transport.peek('orders')
    assert wire.body != payload
    assert wire.attribute(attrs.ENCODING_ALG) == 'base64'

    received, = transport.receive('orders')
    assert received.body == payload
    assert received.attribute('shopId') == 'shop-1'
    assert transport.count('orders') == 0


def test_batch_round_trip(transport):

    bodies = ['one', 'two', 'three']
    transport.send_batch('orders', [Message.create(b) for b in bodies])

    assert transport.count('orders') == 3
    assert [m.body for m in transport.receive('orders', max_messages=10)] == bodies


def send_unprocessed(transport, queue_name, message):
    pipeline, transport.pipeline = transport.pipeline, Pipeline()
    try:
        transport.send(queue_name, message)
    finally:
        transport.pipeline = pipeline


def test_receive_foreign_plain_message(transport):

    message = Message.create('hello')
    send_unprocessed(transport, 'q', message)

    received, = transport.receive('q')
    assert received is message


def test_receive_rejects_partial_metadata(transport):

    broken = Message.create('hello', attributes={attrs.COMPRESSION_ALG: 'gzip'})
    send_unprocessed(transport, 'q', broken)

    with pytest.raises(MissingAttributeError):
        transport.receive('q')


def test_rejected_message_does_not_take_neighbours_with_it(transport):

    transport.send('q', Message.create('good-1'))
    send_unprocessed(transport, 'q', Message.create('broken', attributes={attrs.COMPRESSION_ALG: 'gzip'}))
    transport.send('q', Message.create('good-2'))

    with pytest.raises(MissingAttributeError):
        transport.receive('q', max_messages=10)

    assert transport.count('q') == 2
    assert [m.body for m in transport.receive('q', max_messages=10)] == ['good-1', 'good-2']


def test_rejected_message_keeps_queue_order(transport):

    send_unprocessed(transport, 'q', Message.create('broken', attributes={attrs.ENCODING_ALG: 'base64'}))
    transport.send('q', Message.create('later'))
    send_unprocessed(transport, 'q', Message.create('plain'))

    with pytest.raises(MissingAttributeError):
        transport.receive('q', max_messages=2)

    assert [m.body for m in transport.receive('q', max_messages=10)] == ['later', 'plain']


def test_pipeline_rejection_drops_message(transport):

    class DropAll(BaseMiddleware):
        def on_send(self, message):
            return None

    transport.pipeline.add(DropAll())

    assert transport.send('orders', Message.create('dropped')) is None
    assert transport.send_batch('orders', [Message.create('dropped')]) == []
    assert transport.count('orders') == 0


def test_clear(transport):

    transport.send('orders', Message.create('a'))
    transport.send('orders', Message.create('b'))

    assert transport.clear('orders') == 2
    assert transport.count('orders') == 0
