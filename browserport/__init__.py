"""BrowserPort: pick a browser for every link the OS opens."""
