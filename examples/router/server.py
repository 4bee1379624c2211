"""A tiny keep-alive HTTP/1.1 server routing requests with switchyard.

   python examples/router/server.py --port 8000
   curl -v http://127.0.0.1:8000/articles/123?format=json
   curl -v -X POST -F "a=b" http://127.0.0.1:8000/
"""
from argparse import ArgumentParser
import asyncio

import uvloop

from switchyard import Router, RoutingHandler


def index(routed):
    return 200, 'Hello {}!'.format(routed.method)


def show(routed):
    return 200, 'path: {}, pathParams: {}, queryParams: {}'.format(
        routed.path, dict(routed.path_params), routed.query_params)


router = Router() \
    .get('/', index) \
    .post('/', index) \
    .get('/articles/:id', show) \
    .get('/static/:*', show)


def render(status_code, text, keep_alive):
    body = text.encode('utf-8')
    reason = {100: 'Continue', 200: 'OK', 404: 'Not Found'}[status_code]
    data = (
        'HTTP/1.1 ', str(status_code), ' ', reason, '\r\n',
        'Connection: ', 'keep-alive' if keep_alive else 'close', '\r\n',
        'Content-Type: text/plain; charset=utf-8\r\n',
        'Content-Length: ', str(len(body)), '\r\n\r\n',
    )
    return ''.join(data).encode('utf-8') + body


async def read_head(reader):
    head = await reader.readuntil(b'\r\n\r\n')
    request_line, *lines = head.decode('latin1').split('\r\n')
    method, uri, version = request_line.split(' ', 2)
    headers = {}
    for line in lines:
        if line:
            name, _, value = line.partition(':')
            headers[name.strip().lower()] = value.strip()

    return method, uri, version, headers


async def handle_connection(handler, reader, writer):
    try:
        while True:
            try:
                method, uri, version, headers = await read_head(reader)
            except (asyncio.IncompleteReadError, ConnectionError):
                break

            if handler.expects_continue(headers):
                writer.write(b'HTTP/1.1 100 Continue\r\n\r\n')
                await writer.drain()

            length = int(headers.get('content-length', 0))
            if length:
                await reader.readexactly(length)

            keep_alive = version == 'HTTP/1.1' and \
                headers.get('connection', '').lower() != 'close'

            routed = handler.dispatch(method, uri)
            if routed is None or routed.not_found:
                response = render(404, 'Not Found', keep_alive)
            else:
                response = render(*routed.target(routed), keep_alive)

            writer.write(response)
            await writer.drain()

            if not keep_alive:
                break
    finally:
        writer.close()


def main():
    parser = ArgumentParser()
    parser.add_argument('--host', dest='host', type=str, default='127.0.0.1')
    parser.add_argument('--port', dest='port', type=int, default=8000)
    args = parser.parse_args()

    print(router)

    handler = RoutingHandler(router)
    loop = uvloop.new_event_loop()
    asyncio.set_event_loop(loop)

    server = loop.run_until_complete(asyncio.start_server(
        lambda r, w: handle_connection(handler, r, w),
        host=args.host, port=args.port))

    print('Accepting connections on http://{}:{}'.format(
        args.host, args.port))

    try:
        loop.run_forever()
    except KeyboardInterrupt:
        pass
    finally:
        server.close()
        loop.run_until_complete(server.wait_closed())
        loop.close()


if __name__ == '__main__':
    main()
