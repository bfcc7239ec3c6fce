"""URL routes of file objects app."""

from django.urls import path

from server.apps.file_objects.views import (
    FileObjCollectionView,
    FileObjDataView,
    FileObjDetailView,
    FileObjFilterView,
)

app_name = 'file_objects'

urlpatterns = [
    path('', FileObjCollectionView.as_view(), name='collection'),
    path('filter/', FileObjFilterView.as_view(), name='filter'),
    path('<uuid:file_id>/', FileObjDetailView.as_view(), name='detail'),
    path('<uuid:file_id>/data/', FileObjDataView.as_view(), name='data'),
]
