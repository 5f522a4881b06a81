"""Subpackage for fungible-token models; it holds no modules yet."""