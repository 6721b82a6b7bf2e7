"""urshort - redirect short paths to configured URIs."""
