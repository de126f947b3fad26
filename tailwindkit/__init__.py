"""
TailwindKit - build the Tailwind CSS standalone binary from source.

For platforms without upstream prebuilt binaries (FreeBSD, OpenBSD, NetBSD,
uncommon architectures) TailwindKit clones a tagged Tailwind CSS release and
builds it with the local Rust toolchain.
"""

__version__ = "0.1.0"
