"""
Protobuf messages of the tks cluster-info service.

The descriptors are assembled once at import time and registered in the
default descriptor pool, which yields regular protobuf message classes
(serialization, ``json_format`` and ``Timestamp`` fields all behave as with
protoc output).

    message Cluster {
      string id = 1;
      string name = 2;
      string contract_id = 3;
      string csp_id = 4;
      ClusterStatus status = 5;
      string status_desc = 6;
      google.protobuf.Timestamp created_at = 7;
      google.protobuf.Timestamp updated_at = 8;
    }

    service ClusterInfoService {
      rpc GetClusters(GetClustersRequest) returns (GetClustersResponse);
    }
"""

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory
from google.protobuf import timestamp_pb2
from google.protobuf.internal import enum_type_wrapper

PACKAGE = "tks"
CLUSTER_INFO_SERVICE = f"{PACKAGE}.ClusterInfoService"
GET_CLUSTERS_METHOD = f"/{CLUSTER_INFO_SERVICE}/GetClusters"

# Wire order matters: the index is the enum number.
CLUSTER_STATUS_NAMES = (
    "UNSPECIFIED",
    "INSTALLING",
    "RUNNING",
    "DELETING",
    "DELETED",
    "ERROR",
)

_Field = descriptor_pb2.FieldDescriptorProto


def _add_field(message, name, number, field_type, type_name=None, repeated=False):
    field = message.field.add(
        name=name,
        number=number,
        type=field_type,
        label=_Field.LABEL_REPEATED if repeated else _Field.LABEL_OPTIONAL,
    )
    if type_name:
        field.type_name = type_name
    return field


def _build_file_descriptor() -> descriptor_pb2.FileDescriptorProto:
    file_proto = descriptor_pb2.FileDescriptorProto(
        name="tks_client/proto/cluster_info.proto",
        package=PACKAGE,
        syntax="proto3",
    )
    file_proto.dependency.append(timestamp_pb2.DESCRIPTOR.name)

    status = file_proto.enum_type.add(name="ClusterStatus")
    for number, name in enumerate(CLUSTER_STATUS_NAMES):
        status.value.add(name=name, number=number)

    cluster = file_proto.message_type.add(name="Cluster")
    _add_field(cluster, "id", 1, _Field.TYPE_STRING)
    _add_field(cluster, "name", 2, _Field.TYPE_STRING)
    _add_field(cluster, "contract_id", 3, _Field.TYPE_STRING)
    _add_field(cluster, "csp_id", 4, _Field.TYPE_STRING)
    _add_field(cluster, "status", 5, _Field.TYPE_ENUM, type_name=f".{PACKAGE}.ClusterStatus")
    _add_field(cluster, "status_desc", 6, _Field.TYPE_STRING)
    _add_field(cluster, "created_at", 7, _Field.TYPE_MESSAGE, type_name=".google.protobuf.Timestamp")
    _add_field(cluster, "updated_at", 8, _Field.TYPE_MESSAGE, type_name=".google.protobuf.Timestamp")

    request = file_proto.message_type.add(name="GetClustersRequest")
    _add_field(request, "contract_id", 1, _Field.TYPE_STRING)

    response = file_proto.message_type.add(name="GetClustersResponse")
    _add_field(response, "code", 1, _Field.TYPE_INT32)
    _add_field(response, "error", 2, _Field.TYPE_STRING)
    _add_field(response, "clusters", 3, _Field.TYPE_MESSAGE, type_name=f".{PACKAGE}.Cluster", repeated=True)

    service = file_proto.service.add(name="ClusterInfoService")
    service.method.add(
        name="GetClusters",
        input_type=f".{PACKAGE}.GetClustersRequest",
        output_type=f".{PACKAGE}.GetClustersResponse",
    )
    return file_proto


_pool = descriptor_pool.Default()
_pool.AddSerializedFile(_build_file_descriptor().SerializeToString())

DESCRIPTOR = _pool.FindFileByName("tks_client/proto/cluster_info.proto")

ClusterStatus = enum_type_wrapper.EnumTypeWrapper(_pool.FindEnumTypeByName(f"{PACKAGE}.ClusterStatus"))
Cluster = message_factory.GetMessageClass(_pool.FindMessageTypeByName(f"{PACKAGE}.Cluster"))
GetClustersRequest = message_factory.GetMessageClass(_pool.FindMessageTypeByName(f"{PACKAGE}.GetClustersRequest"))
GetClustersResponse = message_factory.GetMessageClass(_pool.FindMessageTypeByName(f"{PACKAGE}.GetClustersResponse"))
