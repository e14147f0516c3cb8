"""
=============================================================================
VARIANT RESOLUTION
=============================================================================

Finds which physical file answers a request, by probing an ordered list
of candidate paths.

=============================================================================
CONTENT NEGOTIATION BY EXISTENCE
=============================================================================

    Request:  GET /docs/   Accept-Language: fr, de

    Candidates (first that exists wins):

        /srv/docs/index.html.fr     ← Accept-Language, in order
        /srv/docs/index.html.de
        /srv/docs/index.html        ← no suffix
        /srv/docs/index.html.en     ← default suffix, always last

The winner is the first acceptable language that has a file, not the
best matching language overall.

=============================================================================
DIRECTORIES AND REDIRECTS
=============================================================================

    "/docs/"  ends with "/"   → probe "/docs/index.html" + suffixes
                                nothing found: 404, never a redirect

    "/docs"   no trailing "/" → probe "/docs" + suffixes
                                nothing found: probe "/docs/index.html"
                                + suffixes; found → 301 to "/docs/"

The redirect is only issued when its target would resolve, so a
redirect never points at a missing page.

=============================================================================
"""

import logging
from typing import Iterable, Iterator, List, Optional, Sequence

from ..core.metadata import MetadataProvider, ResolvedResource


logger = logging.getLogger(__name__)

Suffix = Optional[str]

SEPARATOR = "/"


def language_suffixes(languages: Iterable[str], default_suffix: str = ".en") -> List[Suffix]:
    """
    Build the ordered suffix list for a set of language preferences.

    Example:
        >>> language_suffixes(["fr", "de"])
        ['.fr', '.de', None, '.en']
    """
    suffixes: List[Suffix] = [f".{language}" for language in languages]
    suffixes.append(None)
    suffixes.append(default_suffix)
    return suffixes


def candidate_paths(base_path: str, suffixes: Iterable[Suffix]) -> Iterator[str]:
    """Lazily yield base_path with each suffix appended (None: as is)."""
    for suffix in suffixes:
        yield base_path if suffix is None else base_path + suffix


def first_existing(candidates: Iterable[str], provider: MetadataProvider) -> Optional[ResolvedResource]:
    """
    Return the first candidate the provider knows about.

    Candidates are consumed lazily; nothing after the hit is looked up.
    """
    for path in candidates:
        metadata = provider.lookup(path)
        if metadata is not None:
            return ResolvedResource(path, metadata)
    return None


def resolve(base_path: str, suffixes: Sequence[Suffix], provider: MetadataProvider) -> Optional[ResolvedResource]:
    """
    Resolve base_path to the first existing language variant.

    Args:
        base_path: Physical path without language suffix.
        suffixes: Ordered suffixes to try.
        provider: Metadata lookup.

    Returns:
        (path, metadata) of the variant found, or None.
    """
    resolved = first_existing(candidate_paths(base_path, suffixes), provider)
    if resolved is None:
        logger.debug(f"No variant of {base_path} among {list(suffixes)}")
    else:
        logger.debug(f"Resolved {base_path} to {resolved.path}")
    return resolved


def is_directory_path(path: str) -> bool:
    return path.endswith(SEPARATOR)


def add_index(path: str, index_file: str) -> str:
    """Append the index file to a directory-shaped path."""
    if is_directory_path(path):
        return path + index_file
    return path


def redirect_path(path: str, index_file: str) -> Optional[str]:
    """The index file a non-directory path would redirect to, or None."""
    if is_directory_path(path):
        return None
    return path + SEPARATOR + index_file


def find_redirect(
    path: str,
    suffixes: Sequence[Suffix],
    provider: MetadataProvider,
    index_file: str,
) -> Optional[ResolvedResource]:
    """
    Search for an index variant under `path` treated as a directory.

    Returns:
        The index variant that justifies a redirect, or None.
    """
    candidate = redirect_path(path, index_file)
    if candidate is None:
        return None
    return resolve(candidate, suffixes, provider)


def is_negotiated(path: str, extensions: Optional[Sequence[str]]) -> bool:
    """
    Whether `path` takes part in language negotiation.

    extensions=None negotiates every path; otherwise only paths ending
    with one of the listed extensions (e.g. (".html",)).
    """
    if extensions is None:
        return True
    return path.endswith(tuple(extensions))
