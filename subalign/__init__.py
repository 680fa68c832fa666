"""SubAlign: partition long ASR token streams and force-align corrected transcripts."""

__version__ = "0.1.0"
