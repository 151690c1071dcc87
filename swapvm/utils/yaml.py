# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from pathlib import Path
from typing import Any, Optional, TypeVar, Union

import yaml
from pydantic import BaseModel

from swapvm.utils.dict import deep_merge

EXTENDS_KEY = 'extends'

T = TypeVar('T', bound=BaseModel)


def dict_from_yaml(*, filepath: Union[Path, str]) -> dict[str, Any]:
    """Load a yaml file that must contain a mapping, an empty file gives an empty dict."""
    path = Path(filepath)
    if not path.is_file():
        raise ValueError(f"'{path}' is not a file")
    with path.open('r') as file:
        contents = yaml.safe_load(file)
    if contents is None:
        return {}
    if not isinstance(contents, dict):
        raise ValueError(f"'{path}' cannot be parsed as a dictionary")
    return contents


def dict_from_extended_yaml(
    *,
    filepath: Union[Path, str],
    custom_root: Optional[Path] = None,
    _seen: tuple[Path, ...] = (),
) -> dict[str, Any]:
    """
    Load a yaml file that may name a parent file in its `extends` key, the parent is loaded first and the keys of
    the child are merged on top of it.

    The parent is looked up next to the child and then, if it's not there, under `custom_root`. The `extends` key is
    never present in the result.
    """
    path = Path(filepath).resolve()
    if path in _seen:
        raise ValueError(f"'{path}' extends itself")
    contents = dict_from_yaml(filepath=path)
    parent = contents.pop(EXTENDS_KEY, None)
    if not parent:
        return contents

    parent_path = path.parent / str(parent)
    if not parent_path.is_file() and custom_root is not None:
        parent_path = custom_root / str(parent)

    base = dict_from_extended_yaml(filepath=parent_path, custom_root=custom_root, _seen=_seen + (path,))
    return deep_merge(base, contents)


def model_from_extended_yaml(model: type[T], *, filepath: Union[Path, str], custom_root: Optional[Path] = None) -> T:
    return model.model_validate(dict_from_extended_yaml(filepath=filepath, custom_root=custom_root))
