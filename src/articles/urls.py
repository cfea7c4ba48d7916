"""Routing for article endpoints."""

from django.urls import path

from .views import ArticleDetailView, ArticleListView

urlpatterns = [
    path("article/", ArticleListView.as_view(), name="article-list"),
    path("article/<int:pk>/", ArticleDetailView.as_view(), name="article-detail"),
]
