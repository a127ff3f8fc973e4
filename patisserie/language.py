# -*- coding: utf-8 -*-

# Copyright(C) 2025 Beth Rennie
#
# This file is part of patisserie.
#
# patisserie is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# patisserie is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with patisserie. If not, see <https://www.gnu.org/licenses/>.

import os


__all__ = ['AUTODETECT', 'EXTENSIONS', 'FILENAMES', 'guess_language',
           'resolve_language']


AUTODETECT = 'autodetect'
"""
Ask Pastery to detect the language itself.
"""

# Pastery highlights with Pygments, so tags are Pygments lexer aliases.
EXTENSIONS = {
    'bash': 'bash',
    'bat': 'bat',
    'c': 'c',
    'cc': 'cpp',
    'cfg': 'ini',
    'clj': 'clojure',
    'cmake': 'cmake',
    'coffee': 'coffeescript',
    'conf': 'ini',
    'cpp': 'cpp',
    'cs': 'csharp',
    'css': 'css',
    'cxx': 'cpp',
    'd': 'd',
    'dart': 'dart',
    'diff': 'diff',
    'el': 'emacs-lisp',
    'erl': 'erlang',
    'ex': 'elixir',
    'exs': 'elixir',
    'f90': 'fortran',
    'fs': 'fsharp',
    'go': 'go',
    'groovy': 'groovy',
    'h': 'c',
    'hpp': 'cpp',
    'hs': 'haskell',
    'htm': 'html',
    'html': 'html',
    'ini': 'ini',
    'java': 'java',
    'jl': 'julia',
    'js': 'javascript',
    'json': 'json',
    'jsx': 'jsx',
    'kt': 'kotlin',
    'less': 'less',
    'lisp': 'common-lisp',
    'lua': 'lua',
    'm': 'objective-c',
    'md': 'markdown',
    'mk': 'make',
    'ml': 'ocaml',
    'nim': 'nim',
    'nix': 'nix',
    'patch': 'diff',
    'php': 'php',
    'pl': 'perl',
    'pm': 'perl',
    'ps1': 'powershell',
    'py': 'python',
    'pyi': 'python',
    'r': 'r',
    'rb': 'ruby',
    'rs': 'rust',
    'rst': 'rst',
    'sass': 'sass',
    'scala': 'scala',
    'scm': 'scheme',
    'scss': 'scss',
    'sh': 'bash',
    'sql': 'sql',
    'swift': 'swift',
    'tex': 'tex',
    'toml': 'toml',
    'ts': 'typescript',
    'tsx': 'tsx',
    'vim': 'vim',
    'vue': 'vue',
    'xml': 'xml',
    'yaml': 'yaml',
    'yml': 'yaml',
    'zig': 'zig',
    'zsh': 'zsh',
}

# files recognised by their whole name, looked up before the extension
FILENAMES = {
    '.bash_profile': 'bash',
    '.bashrc': 'bash',
    '.vimrc': 'vim',
    '.zshrc': 'zsh',
    'CMakeLists.txt': 'cmake',
    'Dockerfile': 'docker',
    'GNUmakefile': 'make',
    'Gemfile': 'ruby',
    'Makefile': 'make',
    'Rakefile': 'ruby',
    'makefile': 'make',
}


def guess_language(path):
    """
    Guess the language of a file from its name.

    :param path: path of the file
    :type path: str
    :returns: the language tag, or None if the extension is unknown
    :rtype: str or None
    """
    if not path:
        return None
    name = os.path.basename(path)
    if name in FILENAMES:
        return FILENAMES[name]

    _, sep, extension = name.rpartition('.')
    if not sep:
        return None
    return EXTENSIONS.get(extension.lower())


def resolve_language(language=None, path=None):
    """
    Pick the language to send.

    An explicit language (including :data:`AUTODETECT`) is used as is; the
    service is the authority on what it understands. Otherwise the language
    is guessed from the file name. Content from standard input has no
    language and the service decides.
    """
    if language is not None:
        return language
    if path:
        return guess_language(path)
    return None
