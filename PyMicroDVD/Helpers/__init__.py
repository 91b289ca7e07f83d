import os

def GetInputPath(filepath : str|None) -> str|None:
    """
    Normalize the input file path for cross-platform compatibility.
    """
    if not filepath:
        return None
    return os.path.normpath(filepath)

def GetOutputPath(filepath : str|None, suffix : str|None = None, format_extension : str|None = None) -> str|None:
    """
    Generate an output path next to the input file with a suffix and format extension.

    Args:
        filepath: Input file path to base output path on
        suffix: Suffix inserted before the extension (defaults to "normalized")
        format_extension: Target format extension. If None, infers from input filepath.

    Returns:
        str: Output path with format: "basename.suffix.extension"
        None: If filepath is None
    """
    if not filepath:
        return None

    directory = os.path.dirname(filepath)
    basename, current_extension = os.path.splitext(os.path.basename(filepath))

    if format_extension:
        target_extension = format_extension if format_extension.startswith('.') else f'.{format_extension}'
    else:
        target_extension = current_extension or '.sub'

    suffix = f".{suffix or 'normalized'}"
    if not basename.endswith(suffix):
        basename = basename + suffix

    return os.path.normpath(os.path.join(directory, f"{basename}{target_extension}"))
