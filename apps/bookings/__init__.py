"""Bookings app package.

This app holds the booking domain: the booking model with its computed
pricing and payment state, the Razorpay gateway client, payment
verification and the pending payment reminder task.
"""
