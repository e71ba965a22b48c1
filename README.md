# nbrtool

`nbrtool` converts source resources into NBR (binary resource) files. It
handles:

- **textures**: `.png`, `.jpg`, `.jpeg`, `.bmp`, `.psd`, `.tga`, `.gif`,
  `.hdr`, `.pic`, `.ppm`, `.pgm`. Pixels are always stored as RGBA; the
  recorded channel count is that of the source image.
- **cubemaps**: a directory of face images. The directory is walked
  recursively in name order, every entry must be a supported image, and at
  most 6 faces are allowed. Faces are stored as RGBA, the channel count is
  recorded as 4, and the size is taken from the last face.
- **shaders**: plain-text shader source, read as UTF-8.

## Installation

```
pip install .
```

## Command line

```
nbr [--resource-type -rt] [--dir -d] [--recurse -r] <src_path> [<dest_dir>]
```

| Option                   | Meaning                                                        |
|--------------------------|----------------------------------------------------------------|
| `--resource-type`, `-rt` | Resource type: `TEXTURE`, `CUBEMAP`, `SHADER`, `MODEL`, `FONT` |
| `--dir`, `-d`            | Treat every entry inside `src_path` as a source                |
| `--recurse`, `-r`        | With `--dir`, walk `src_path` recursively                      |
| `--help`, `-h`           | Show help and exit                                             |

Options are read in order and only affect a source path that comes after
them. Type names are case-sensitive. Relative paths are taken against the
current directory. If you leave out `dest_dir`, files go to the current
directory. Each output file keeps the source's name, with the extension
replaced by `.nbr`.

Examples:

```
nbr -rt TEXTURE assets/brick.png out/
nbr -rt TEXTURE -d -r assets/textures out/
nbr -rt CUBEMAP assets/skybox out/
nbr -rt CUBEMAP -d assets/skyboxes out/
nbr -rt SHADER assets/shaders/default.glsl
```

Without `-d`, a cubemap source is the directory holding its faces. With
`-d`, each entry of the given directory is taken as one cubemap directory.

A line is printed for each converted file. Errors go to standard error
with an `[NBR-ERROR]:` prefix. If a source fails to convert, the others are
still attempted. The exit status is 0 on success. It is 1 when help was
shown, when the arguments were malformed, or when any conversion failed.
Running `nbr` with no arguments reports an error and prints the help.

## File layout

All fields are little-endian. Every file starts with a header:

| Field         | Type   | Value                                |
|---------------|--------|--------------------------------------|
| identifier    | uint8  | 107                                  |
| major version | int16  | 0                                    |
| minor version | int16  | 1                                    |
| resource type | int16  | a `ResourceType` value               |

The body follows:

- texture: width (uint32), height (uint32), channels (int8), then the RGBA
  pixels;
- cubemap: width (uint32), height (uint32), channels (int8), face count
  (uint8), then each face's RGBA pixels in order;
- shader: byte length (uint32), then the UTF-8 source.

## Library use

Parsing and planning are available from Python:

```python
from nbrtool.lexer import tokenize
from nbrtool.parser import parse_tokens

request = parse_tokens(tokenize(["nbr", "-rt", "TEXTURE", "brick.png", "out"]), cwd=".")
for job in request.jobs():
    print(job.resource_type, job.source, job.destination)
```

`parse_tokens` raises `HelpRequested` for the help option and
`ArgumentError` for malformed arguments. `help_text()` returns the usage
text. `output_path(source, output_dir)` gives the destination of a source.

Lower-level helpers:

- `nbrtool.image_loader`: `load_texture(path)` returns an `NBRTexture`,
  `load_cubemap(directory)` returns an `NBRCubemap`, and
  `is_valid_extension(ext)` checks a suffix such as `".png"`. On failure the
  loaders raise `ImageLoadError`.
- `nbrtool.shader_loader`: `load_shader(path)` returns the source text. It
  raises `ShaderLoadError` on failure.
- `nbrtool.nbr_format`: `NBRHeader` with `is_valid()`, and
  `header_for(resource_type)`.
- `nbrtool.resources`: `ResourceType` and `resource_type_from_name(name)`.
  An unknown name raises `UnknownResourceTypeError`.

## What it does not do

- `MODEL` and `FONT` are accepted as types, but nothing is converted or
  written for them.
- NBR files are only written. Nothing reads them back, apart from checking
  a header with `NBRHeader.is_valid()`.
- Writing files is done only by the `nbr` command. There is no public
  function that writes an NBR file.

## Running the tests

```
pip install .[test]
pytest
```