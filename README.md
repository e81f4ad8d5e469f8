# qqwire

Low-level encoding primitives for the QQ mobile client protocol, with no
runtime dependencies beyond the standard library.

- `qqwire.tea.Tea`: the 16-round TEA cipher in the chained mode the protocol uses.
  `encrypt` pads to a multiple of 8 bytes; `decrypt` strips the padding and raises
  `ValueError` on input that cannot be a ciphertext. A key that is not 16 bytes
  long acts as the all-zero key.
- `qqwire.writer.Writer` and `qqwire.writer.build`: a big-endian packet builder with
  fixed-width integers, length-prefixed strings and byte strings, back-patched
  length fields (`fill_uint16` / `write_uint16_at`, `fill_uint32` / `write_uint32_at`,
  `write_int_lv_packet`) and `encrypt_and_write` for TEA-sealed sections.
- `qqwire.reader.Reader`: the matching reader over a byte string; reading past the
  end raises `EOFError`.
- `qqwire.reader.NetworkReader`: reads exact byte counts from any object with a
  `recv(bufsize)` method, such as a socket; raises `EOFError` if the peer closes.
- `qqwire.codec`: `zlib_compress` / `zlib_uncompress`, `gzip_compress` /
  `gzip_uncompress` (malformed input raises `ValueError`), `gen_uuid`,
  `calculate_image_resource_id`, `uint32_to_ipv4_address` and `to_bytes` for
  16- and 32-bit big-endian integers.
- `qqwire.jce.encoder.JceWriter` and `qqwire.jce.decoder.JceReader`: the tagged JCE
  (Tars) format. The reader returns a default (`0`, `""` or `None`) for a missing
  field or one of an unexpected type, and raises `JceDecodeError` (a `ValueError`)
  on truncated or malformed data.
- `qqwire.jce.structs` and `qqwire.jce.social`: the protocol's message structures as
  dataclasses deriving from `JceStruct` (`RequestPacket`, `RequestDataVersion3`,
  `SvcReqRegister`, `PushMessageInfo`, `FriendInfo`, `TroopMemberInfo`, ...). Each has
  `to_bytes()` and `read_from(reader)`. Some structures write more fields than they
  read back; fields that are not read keep their defaults.

## Installation

```
pip install qqwire
```

## Examples

Encrypting and decrypting with TEA:

```python
from qqwire.tea import Tea

key = bytes(16)
cipher = Tea(key)
sealed = cipher.encrypt(b"hello")
assert cipher.decrypt(sealed) == b"hello"
```

Building a packet and reading it back:

```python
from qqwire.reader import Reader
from qqwire.writer import build

def body(w):
    w.write_uint16(0x0810)
    w.write_string_short("wtlogin.login")
    w.write_bool(True)

packet = build(body)

r = Reader(packet)
assert r.read_uint16() == 0x0810
assert r.read_string_short() == "wtlogin.login"
assert r.read_byte() == 1
```

Serializing a JCE request and parsing it again:

```python
from qqwire.jce.decoder import JceReader
from qqwire.jce.structs import RequestDataVersion3, RequestPacket

payload = RequestDataVersion3(data={"SvcReqRegister": b"\x0a\x0b"})
pkt = RequestPacket(
    version=3,
    servant_name="PushService",
    func_name="SvcReqRegister",
    buffer=payload.to_bytes(),
)
data = pkt.to_bytes()

parsed = RequestPacket()
parsed.read_from(JceReader(data))
assert parsed == pkt
```

Writing and reading individual JCE fields:

```python
from qqwire.jce.decoder import JceReader
from qqwire.jce.encoder import JceWriter

raw = JceWriter().write_int64(1 << 40, 0).write_string("hi", 1).to_bytes()
r = JceReader(raw)
assert r.read_int64(0) == 1 << 40
assert r.read_string(1) == "hi"
```

## What it does not do

The package only encodes and decodes. It does not open connections, log in,
keep a session, or send and receive messages, and it has no protobuf message
definitions; those are left to the code that uses it.

## Running the tests

```
pip install -e ".[test]"
pytest
```