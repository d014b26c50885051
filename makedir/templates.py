"""Fixed file bodies written by the template actions.

The texts are written verbatim: placeholders such as ``[YEAR]`` are meant
to be edited by hand.
"""

from __future__ import annotations

from .actions import Action

README_CONTENT = """# Project Title

Simple overview of use/purpose.

## Description

An in-depth paragraph about your project and overview of use.

## Getting Started

### Dependencies

* Describe any prerequisites, libraries, OS version, etc., needed before installing program.
* ex. Windows 10

### Installing

* How/where to download your program
* Any modifications needed to be made to files/folders

### Executing program

* How to run the program
* Step-by-step bullets
```bash
code blocks for commands
```

## Help

Any advice for common problems or issues.
```bash
command to run if program contains helper info
```

## Authors

Contributors names and contact info

## Version History

* 0.1
    * Initial Release

## License

This project is licensed under the [NAME HERE] License - see the LICENSE file for details

## Acknowledgments
"""

LICENSE_CONTENT = """MIT License

Copyright (c) [YEAR] [YOUR NAME]

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.
"""

DOCKERFILE_CONTENT = """# Base image (Default: Debian)
ARG BASE_IMAGE=debian:latest
FROM $BASE_IMAGE AS builder

# Set working directory
WORKDIR /app

# Copy project files
COPY . .

# Install dependencies based on the selected stack
ARG STACK=node
RUN case "$STACK" in \\
        node) apt update && apt install -y curl && curl -fsSL https://deb.nodesource.com/setup_16.x | bash - && apt install -y nodejs ;; \\
        python) apt update && apt install -y python3 python3-pip ;; \\
        rust) apt update && apt install -y curl && curl https://sh.rustup.rs -sSf | sh -s -- -y ;; \\
        go) apt update && apt install -y golang ;; \\
        deno) curl -fsSL https://deno.land/install.sh | sh ;; \\
        *) echo "No valid stack specified"; exit 1 ;; \\
    esac

# Expose port (Modify as needed)
EXPOSE 3000

# Command to run the application (Modify based on project type)
CMD ["echo", "Container is running, customize CMD as needed!"]
"""

DENO_JSON_CONTENT = """{
  "importMap": "./import_map.json"
}
"""

TEMPLATE_FILES: dict[Action, tuple[str, str]] = {Action.README: ("README.md", README_CONTENT),
        Action.LICENSE: ("LICENSE", LICENSE_CONTENT), Action.DOCKER: ("Dockerfile", DOCKERFILE_CONTENT),
        Action.DENO: ("deno.json", DENO_JSON_CONTENT), }
