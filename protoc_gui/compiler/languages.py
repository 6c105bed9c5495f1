"""Output language labels and the protoc flags they map to"""
from types import MappingProxyType
from typing import List, Optional

# Dropdown order
LANGUAGES: List[str] = [
    "C++", "C#", "Java", "JavaScript", "Objective C",
    "PHP", "Python", "Ruby", "Golang"
]

LANGUAGE_FLAGS = MappingProxyType({
    "C++": "--cpp_out",
    "C#": "--csharp_out",
    "Java": "--java_out",
    "JavaScript": "--js_out",
    "Objective C": "--objc_out",
    "PHP": "--php_out",
    "Python": "--python_out",
    "Ruby": "--ruby_out",
    "Golang": "--go_out",
})


def get_language_flag(label: Optional[str]) -> str:
    """
    Return the protoc output flag for a language label.

    Unknown or empty labels give an empty string, which callers treat
    as "no language selected".
    """
    if not label:
        return ""
    return LANGUAGE_FLAGS.get(label, "")
