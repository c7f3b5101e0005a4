"""Page-object layer and live browser scenarios for the storefront demo."""
