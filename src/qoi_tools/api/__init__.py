"""
High-level API for working with QOI images.

The main entry point is :py:class:`~qoi_tools.api.qoi_image.QOIImage`, which
holds decoded pixels and converts them from and to Pillow images and NumPy
arrays.
"""
