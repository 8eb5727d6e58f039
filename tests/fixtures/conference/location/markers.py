def location_info_streamer(func):
    """Marks a method that streams location information."""
    return func
