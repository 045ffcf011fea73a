# buup

buup is a collection of small, self-contained text transformers. Each one
takes a string and returns a string. The collection covers ROT13, slugs,
case conversion, text statistics, SHA-1 and SHA-256 hashing, URL
encoding, decoding and parsing, UUID generation, and SQL and XML
formatting and minification. The package has no third-party dependencies.

## Transformers

Every transformer is a subclass of `buup.base.Transformer`. Each class
has these attributes:

- `name`
- `id`
- `description`
- `category`, which is a `buup.base.TransformerCategory`
- `default_test_input`

Each class also has a `transform(text)` method. If the input cannot be
handled, `transform` raises `buup.base.TransformError` or one of its
subclasses. These are `InvalidArgumentError` and `UrlDecodeError`.

Instances take no arguments. Two instances of the same class compare
equal.

| Module            | Transformers                                                                         |
|-------------------|--------------------------------------------------------------------------------------|
| `buup.base`       | `TextReverse`                                                                        |
| `buup.text`       | `Rot13`, `Slugify`, `SnakeToCamel`, `TextStats`, `UniqueLines`, `WhitespaceRemover`  |
| `buup.hashing`    | `Sha1Hash`, `Sha256Hash`                                                             |
| `buup.urlcodec`   | `UrlEncode`, `UrlDecode`                                                             |
| `buup.urlparser`  | `UrlParser`                                                                          |
| `buup.uuidgen`    | `UuidGenerate` (version 4, not cryptographically secure; the input is ignored)       |
| `buup.uuid5`      | `Uuid5Generate` (input `namespace|name`)                                             |
| `buup.sqlformat`  | `SqlFormatter`                                                                       |
| `buup.sqlminify`  | `SqlMinifier`                                                                        |
| `buup.xmlformat`  | `XmlFormatter`                                                                       |
| `buup.xmlminify`  | `XmlMinifier`                                                                        |

Most modules also expose the underlying operation as a plain function:

- `buup.hashing`: `sha1_digest(data)` and `sha256_digest(data)` return raw digest bytes.
- `buup.urlcodec`: `url_encode(text)` and `url_decode(text)`.
- `buup.urlparser`: `parse_url(text)` returns a `UrlComponents` dataclass. Its `format()` method produces the transformer's output.
- `buup.uuid5`: `parse_namespace(namespace)` returns the 16 namespace bytes. `uuid5(namespace, name)` returns the UUID string.
- The SQL and XML modules: `format_sql(text)`, `minify_sql(text)`, `format_xml(text)` and `minify_xml(text)`.

## Examples

```python
from buup.text import Rot13, Slugify, SnakeToCamel
from buup.hashing import Sha256Hash
from buup.urlcodec import url_encode, url_decode

Rot13().transform("Hello 123! - World?")            # 'Uryyb 123! - Jbeyq?'
Slugify().transform("This is a Test String! 123?")  # 'this-is-a-test-string-123'
SnakeToCamel().transform("my_variable_name")        # 'myVariableName'

Sha256Hash().transform("abc")
# 'ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad'

url_encode("100%")               # '100%25'
url_decode("Hello%2C+World%21")  # 'Hello, World!'
```

You can parse a URL into its parts:

```python
from buup.urlparser import UrlParser, parse_url

print(UrlParser().transform("http://example.com/home"))
# Scheme: http
# UserInfo: -
# Host: example.com
# Port: -
# Path: /home
# Query: -
# Fragment: -

parse_url("example.com:8080").port  # '8080'
```

You can generate a name-based UUID. The namespace is either a UUID or
one of `dns`, `url`, `oid` and `x500`:

```python
from buup.uuid5 import Uuid5Generate

Uuid5Generate().transform("dns|example.com")
# 'cfbff0d1-9375-5685-968c-48ce8b15ae17'
```

## Utilities

`buup.crc32.crc32(data)` returns the standard unsigned CRC-32 checksum
of a bytes object:

```python
from buup.crc32 import crc32

crc32(b"123456789") == 0xCBF43926  # True
```

`buup.color.Color` is a dataclass with fields `r`, `g`, `b` and an
optional `a`.

It parses colours with these constructors:

- `Color.from_hex`
- `Color.from_rgb`
- `Color.from_hsl`
- `Color.from_cmyk`

It writes colours out with these methods:

- `to_hex()`
- `to_rgb()`
- `to_hsl()`
- `to_cmyk()`

```python
from buup.color import Color

Color.from_hex("#ff0000").to_rgb()  # 'rgb(255,0,0)'
```

## What it does not do

- buup has no command-line program.
- There is no registry that lists the transformers or looks one up by its `id`. Import the classes from their modules directly.
- The SQL and XML formatters and minifiers work character by character. They do not parse or validate their input.
- `UuidGenerate` uses a simple linear congruential generator. Its UUIDs are not suitable where unpredictability matters.