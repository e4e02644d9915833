"""shopkit: storefront utilities built around injected service ports."""
