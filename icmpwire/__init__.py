"""
    icmpwire - build, serialize and check ICMPv4 query messages

    Echo Request/Reply and Timestamp Request/Reply messages are created fully
    checksummed in one step and serialize to their exact RFC 792 wire format.
"""
__version__ = '0.1.0'
