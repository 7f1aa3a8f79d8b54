import logging
import os
import sys
from optparse import OptionParser

from icmpwire.packets.icmp import (new_echo_reply, new_echo_request, new_timestamp_reply,
                                   new_timestamp_request, ms_since_midnight_utc, validate)

log = logging.getLogger('icmpwire')

ECHO_TYPES = {
    'echo-request': new_echo_request,
    'echo-reply': new_echo_reply,
}
TIMESTAMP_TYPES = {
    'timestamp-request': new_timestamp_request,
    'timestamp-reply': new_timestamp_reply,
}


def parse_arguments(argv=None):
    parser = OptionParser(usage='%prog [options] | %prog --check HEX')
    parser.add_option('-t', '--type', dest='type', default='echo-request',
                      choices=sorted(ECHO_TYPES) + sorted(TIMESTAMP_TYPES),
                      help='Message to build [default: %default]')
    parser.add_option('-i', '--id', dest='id', type='int', default=os.getpid() & 0xffff,
                      help='Identifier [default: pid]')
    parser.add_option('-s', '--seq', dest='seq', type='int', default=1,
                      help='Sequence number [default: %default]')
    parser.add_option('-p', '--payload', dest='payload', default='hi there!',
                      help='Echo payload [default: %default]')
    parser.add_option('--originate', dest='originate', type='int', default=None,
                      help='Originate timestamp [default: ms since midnight UTC]')
    parser.add_option('--receive', dest='receive', type='int', default=0)
    parser.add_option('--transmit', dest='transmit', type='int', default=0)
    parser.add_option('--raw', dest='raw', action='store_true', default=False,
                      help='Write the raw bytes instead of hex')
    parser.add_option('--check', dest='check', metavar='HEX', default=None,
                      help='Validate the checksum of a hex encoded packet')
    parser.add_option('-v', '--verbose', dest='verbose', action='store_true', default=False)
    options, args = parser.parse_args(argv)

    for name, limit in (('id', 0xffff), ('seq', 0xffff), ('originate', 0xffffffff),
                        ('receive', 0xffffffff), ('transmit', 0xffffffff)):
        value = getattr(options, name)
        if value is not None and not 0 <= value <= limit:
            parser.error(f'--{name} must be between 0 and {limit:#x}, got {value}')

    if options.check is not None:
        try:
            options.check = bytes.fromhex(options.check)
        except ValueError as e:
            parser.error(f'--check: {e}')
    return options, args


def build(options):
    if options.type in ECHO_TYPES:
        return ECHO_TYPES[options.type](options.id, options.seq, options.payload.encode())

    originate = options.originate
    if originate is None:
        originate = ms_since_midnight_utc()
    return TIMESTAMP_TYPES[options.type](options.id, options.seq, originate,
                                         options.receive, options.transmit)


def check(packet: bytes) -> int:
    mismatch = validate(packet)
    if mismatch is not None:
        log.error('checksum mismatch: stored=%s computed=%#06x',
                  'none' if mismatch.stored is None else f'{mismatch.stored:#06x}', mismatch.computed)
        return 1
    log.info('checksum ok')
    return 0


def main(argv=None) -> int:
    options, _ = parse_arguments(argv)
    logging.basicConfig(format='%(levelname)-8s [%(asctime)-15s; %(name)s]: %(message)s',
                        level=logging.DEBUG if options.verbose else logging.INFO, stream=sys.stderr)

    if options.check is not None:
        return check(options.check)

    msg = build(options)
    if options.raw:
        msg.write(sys.stdout.buffer)
        sys.stdout.buffer.flush()
    else:
        print(msg.pack().hex(' '))
    log.info('checksum: %#06x', msg.checksum)
    return 0


if __name__ == '__main__':
    sys.exit(main())
